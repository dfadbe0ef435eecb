import logging
from typing import Any

from amfdec.amf0.marker import TypeMarker, OBJECT_END_SENTINEL
from amfdec.amf0.value import Value, Number, Boolean, String, Object, Null, Undefined, Reference, EcmaArray, StrictArray, Date, LongString, Unsupported, XmlDocument, TypedObject
from amfdec.amf0.errors import (
  UnexpectedTypeMarker,
  InvalidUtf8String,
  InvalidBooleanValue,
  ExpectedObjectEndAfterEcmaArray,
  ReservedTypeNotSupported,
  AmfVersion3NotSupported,
  UnexpectedObjectEnd,
  NestingTooDeep,
)
from amfdec.util.bytestream import ByteStream

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64

class Decoder:
  """Recursive-descent AMF0 decoder.

  The decoder only keeps its options; every call to `decode` walks a fresh
  ByteStream, so one instance can be shared freely.

  strict_boolean: accept only 0x00/0x01 as boolean payloads instead of
  treating every non-zero byte as true.
  max_depth: maximum nesting of objects and arrays before NestingTooDeep.
  """

  def __init__(self, strict_boolean: bool = False, max_depth: int = DEFAULT_MAX_DEPTH):
    self.strict_boolean = strict_boolean
    self.max_depth = max_depth

  def decode(self, data: bytes | bytearray | memoryview) -> list[Value]:
    stream = ByteStream(data)
    result: list[Value] = []
    while stream:
      offset = stream.current
      value = self.parseValue(stream, 0)
      logger.debug('decoded %s at offset %d', value.marker.tag, offset)
      result.append(value)
    return result

  def parseValue(self, stream: ByteStream, depth: int) -> Value:
    offset = stream.current
    tag_byte = stream.readU8()
    try:
      marker = TypeMarker(tag_byte)
    except ValueError:
      raise UnexpectedTypeMarker(tag_byte, offset) from None

    match marker:
      case TypeMarker.NUMBER: # Number (8 bytes)
        return Number(stream.readF64())
      case TypeMarker.BOOLEAN: # Boolean (1 bytes)
        return Boolean(self.parseBoolean(stream))
      case TypeMarker.STRING: # String (2 bytes length)
        return String(self.parseString(stream, stream.readU16()))
      case TypeMarker.OBJECT:
        self.checkDepth(stream, depth)
        return Object(self.parseProperties(stream, depth))
      case TypeMarker.NULL:
        return Null()
      case TypeMarker.UNDEFINED:
        return Undefined()
      case TypeMarker.REFERENCE: # index into previously decoded objects, not resolved
        return Reference(stream.readU16())
      case TypeMarker.ECMA_ARRAY:
        self.checkDepth(stream, depth)
        return EcmaArray(self.parseEcmaArray(stream, depth))
      case TypeMarker.OBJECT_END:
        raise UnexpectedObjectEnd(offset)
      case TypeMarker.STRICT_ARRAY:
        self.checkDepth(stream, depth)
        length = stream.readU32()
        return StrictArray([self.parseValue(stream, depth + 1) for _ in range(length)])
      case TypeMarker.DATE:
        return self.parseDate(stream)
      case TypeMarker.LONG_STRING: # Long String (4 bytes length)
        return LongString(self.parseString(stream, stream.readU32()))
      case TypeMarker.UNSUPPORTED:
        return Unsupported()
      case TypeMarker.XML_DOCUMENT: # same layout as Long String
        return XmlDocument(self.parseString(stream, stream.readU32()))
      case TypeMarker.TYPED_OBJECT:
        self.checkDepth(stream, depth)
        class_name = self.parseString(stream, stream.readU16())
        return TypedObject(self.parseProperties(stream, depth), class_name=class_name)
      case TypeMarker.AVM_PLUS_OBJECT:
        raise AmfVersion3NotSupported(offset)
      case TypeMarker.MOVIE_CLIP | TypeMarker.RECORD_SET: # reserved, not supported
        raise ReservedTypeNotSupported(marker, offset)

  def checkDepth(self, stream: ByteStream, depth: int):
    if depth >= self.max_depth:
      raise NestingTooDeep(self.max_depth, stream.current)

  def parseBoolean(self, stream: ByteStream) -> bool:
    offset = stream.current
    value = stream.readU8()
    if self.strict_boolean and value not in (0, 1):
      raise InvalidBooleanValue(value, offset)
    return value != 0

  def parseString(self, stream: ByteStream, length: int) -> str:
    offset = stream.current
    raw = stream.read(length)
    try:
      return str(raw, 'utf-8')
    except UnicodeDecodeError:
      raise InvalidUtf8String(offset) from None

  def parseProperty(self, stream: ByteStream, depth: int) -> tuple[str, Value]:
    name = self.parseString(stream, stream.readU16())
    return name, self.parseValue(stream, depth + 1)

  def parseProperties(self, stream: ByteStream, depth: int) -> dict[str, Value]:
    result: dict[str, Value] = dict()
    while stream.peek(len(OBJECT_END_SENTINEL)) != OBJECT_END_SENTINEL:
      name, value = self.parseProperty(stream, depth)
      result[name] = value
    stream.skip(len(OBJECT_END_SENTINEL))
    return result

  def parseEcmaArray(self, stream: ByteStream, depth: int) -> dict[str, Value]:
    count = stream.readU32() # informational, librtmp terminates with ObjectEnd anyway
    result: dict[str, Value] = dict()
    for _ in range(count):
      if stream.peek(len(OBJECT_END_SENTINEL)) == OBJECT_END_SENTINEL:
        break
      name, value = self.parseProperty(stream, depth)
      result[name] = value
    else:
      stream.ensure(len(OBJECT_END_SENTINEL))
      if stream.peek(len(OBJECT_END_SENTINEL)) != OBJECT_END_SENTINEL:
        raise ExpectedObjectEndAfterEcmaArray(count, stream.current)
    stream.skip(len(OBJECT_END_SENTINEL))
    return result

  def parseDate(self, stream: ByteStream) -> Date:
    milliseconds = stream.readF64()
    timezone = stream.readS16() # should be set zero
    if timezone != 0:
      logger.warning('unexpected non-zero date timezone %d at offset %d', timezone, stream.current - 2)
    return Date(milliseconds, timezone)

def decode(data: bytes | bytearray | memoryview, strict_boolean: bool = False, max_depth: int = DEFAULT_MAX_DEPTH) -> list[Value]:
  return Decoder(strict_boolean=strict_boolean, max_depth=max_depth).decode(data)

def deserialize(data: bytes | bytearray | memoryview) -> list[Any]:
  # plain python values, undefined and unsupported collapse to None
  return [value.native() for value in decode(data)]
