import struct
from typing import Any

from amfdec.amf0.value import Value, Number, Boolean, String, Object, Null, Undefined, Reference, EcmaArray, StrictArray, Date, LongString, Unsupported, XmlDocument, TypedObject

# reference encoder used only to build payloads for the decoder tests

def utf8(value: str, width: int = 2) -> bytes:
  encoded = value.encode('utf-8')
  return len(encoded).to_bytes(width, byteorder='big') + encoded

def properties(fields: dict[str, Value]) -> bytes:
  amf = bytearray()
  for k, v in fields.items():
    amf += utf8(k)
    amf += encode(v)
  amf += b'\x00\x00\x09' # length = 0, name='', value=ObjectEnd
  return bytes(amf)

def encode(value: Value) -> bytes:
  match value:
    case Number(): return b'\x00' + struct.pack('>d', value.value)
    case Boolean(): return b'\x01' + (b'\x01' if value.value else b'\x00')
    case LongString(): return b'\x0C' + utf8(value.value, 4)
    case XmlDocument(): return b'\x0F' + utf8(value.value, 4)
    case String(): return b'\x02' + utf8(value.value)
    case TypedObject(): return b'\x10' + utf8(value.class_name) + properties(value.fields)
    case EcmaArray(): return b'\x08' + len(value.fields).to_bytes(4, byteorder='big') + properties(value.fields)
    case Object(): return b'\x03' + properties(value.fields)
    case Null(): return b'\x05'
    case Undefined(): return b'\x06'
    case Reference(): return b'\x07' + value.index.to_bytes(2, byteorder='big')
    case StrictArray(): return b'\x0A' + len(value.items).to_bytes(4, byteorder='big') + b''.join(encode(item) for item in value.items)
    case Date(): return b'\x0B' + struct.pack('>d', value.milliseconds) + value.timezone.to_bytes(2, byteorder='big', signed=True)
    case Unsupported(): return b'\x0D'
  raise TypeError(f'cannot encode {value!r}')

def serialize(values: list[Any] | Any) -> bytes:
  """Encode plain python values the way an RTMP peer would."""
  amf = bytearray()
  for value in values if type(values) is list else [values]:
    if value is None:
      amf += b'\x05'
    elif type(value) == bool:
      amf += b'\x01' + (b'\x01' if value else b'\x00')
    elif type(value) == int or type(value) == float:
      amf += b'\x00' + struct.pack('>d', float(value))
    elif type(value) == str:
      if len(value.encode('utf-8')) > 0xFFFF:
        amf += b'\x0C' + utf8(value, 4)
      else:
        amf += b'\x02' + utf8(value)
    elif type(value) == list:
      amf += b'\x0A' + len(value).to_bytes(4, byteorder='big')
      for item in value: amf += serialize([item])
    elif type(value) == dict:
      amf += b'\x03'
      for k, v in value.items():
        amf += utf8(k) + serialize([v])
      amf += b'\x00\x00\x09'
    else:
      raise TypeError(f'cannot serialize {type(value).__name__}')
  return bytes(amf)
