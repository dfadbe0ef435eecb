import json
import logging
import math
from functools import partial
from typing import Any

from aiohttp import web

from amfdec.amf0.decoder import Decoder
from amfdec.amf0.errors import DecodeError
from amfdec.amf0.value import Value

logger = logging.getLogger(__name__)

def json_default(value: Any):
  if hasattr(value, 'isoformat'): return value.isoformat() # datetime from native()
  raise TypeError(f'{type(value).__name__} is not JSON serializable')

dumps = partial(json.dumps, ensure_ascii=False, allow_nan=False, default=json_default)

def finite(value: Any) -> Any:
  # JSON has no NaN or Infinity, spell them as strings
  match value:
    case float() if math.isnan(value): return 'NaN'
    case float() if math.isinf(value): return 'Infinity' if value > 0 else '-Infinity'
    case dict(): return { name: finite(item) for name, item in value.items() }
    case list(): return [finite(item) for item in value]
  return value

def render(values: list[Value], native: bool = False) -> list[Any]:
  return [finite(value.native() if native else value.describe()) for value in values]

def error_body(error: DecodeError) -> dict[str, Any]:
  return {
    'error': type(error).__name__,
    'message': error.message,
    'offset': error.offset,
  }

class InspectHandler:

  def __init__(self, decoder: Decoder | None = None):
    self.decoder = decoder if decoder is not None else Decoder()

  async def decode(self, request: web.Request) -> web.Response:
    native = request.query.get('native', '0') in ('1', 'true', 'yes')
    body = await request.read()

    try:
      values = self.decoder.decode(body)
    except DecodeError as e:
      logger.info('rejected %d byte payload: %s', len(body), e)
      return web.json_response(error_body(e), status=422, dumps=dumps)

    return web.json_response({'values': render(values, native)}, dumps=dumps)

  async def health(self, _: web.Request) -> web.Response:
    return web.Response(text='ok')

def make_app(decoder: Decoder | None = None, max_size: int = 1024 ** 2) -> web.Application:
  handler = InspectHandler(decoder)
  app = web.Application(client_max_size=max_size)
  app.add_routes([
    web.post('/decode', handler.decode),
    web.get('/health', handler.health),
  ])
  return app
