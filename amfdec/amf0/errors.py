from amfdec.amf0.marker import TypeMarker

class DecodeError(Exception):
  """Base class for every failure raised while decoding an AMF0 buffer.

  `offset` is the cursor position at which the failure was detected, or
  None when the error was raised outside of a decode call.
  """

  def __init__(self, message: str, offset: int | None = None):
    super().__init__(message if offset is None else f'{message} (offset {offset})')
    self.message = message
    self.offset = offset

class UnexpectedTypeMarker(DecodeError):
  def __init__(self, byte: int, offset: int | None = None):
    super().__init__(f'unexpected type marker 0x{byte:02X}', offset)
    self.byte = byte

class UnexpectedEndOfData(DecodeError, EOFError):
  def __init__(self, needed: int, remaining: int, offset: int | None = None):
    super().__init__(f'unexpected end of data: needed {needed} bytes, {remaining} remaining', offset)
    self.needed = needed
    self.remaining = remaining

class InvalidUtf8String(DecodeError):
  def __init__(self, offset: int | None = None):
    super().__init__('string is not valid UTF-8', offset)

class InvalidBooleanValue(DecodeError):
  def __init__(self, byte: int, offset: int | None = None):
    super().__init__(f'invalid boolean value 0x{byte:02X}', offset)
    self.byte = byte

class ExpectedObjectEndAfterEcmaArray(DecodeError):
  def __init__(self, count: int, offset: int | None = None):
    super().__init__(f'expected object end after {count} ECMA array entries', offset)
    self.count = count

class ReservedTypeNotSupported(DecodeError):
  def __init__(self, tag: TypeMarker, offset: int | None = None):
    super().__init__(f'reserved type {tag.tag} is not supported', offset)
    self.tag = tag

class AmfVersion3NotSupported(DecodeError):
  def __init__(self, offset: int | None = None):
    super().__init__('AMF3 (avm-plus-object) is not supported', offset)

class UnexpectedObjectEnd(DecodeError):
  def __init__(self, offset: int | None = None):
    super().__init__('object end marker outside of an object', offset)

class NestingTooDeep(DecodeError):
  def __init__(self, depth: int, offset: int | None = None):
    super().__init__(f'nesting deeper than {depth} levels', offset)
    self.depth = depth
