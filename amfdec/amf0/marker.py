from enum import IntEnum

class TypeMarker(IntEnum):
  NUMBER = 0x00
  BOOLEAN = 0x01
  STRING = 0x02
  OBJECT = 0x03
  MOVIE_CLIP = 0x04 # reserved, not supported
  NULL = 0x05
  UNDEFINED = 0x06
  REFERENCE = 0x07
  ECMA_ARRAY = 0x08
  OBJECT_END = 0x09
  STRICT_ARRAY = 0x0A
  DATE = 0x0B
  LONG_STRING = 0x0C
  UNSUPPORTED = 0x0D
  RECORD_SET = 0x0E # reserved, not supported
  XML_DOCUMENT = 0x0F
  TYPED_OBJECT = 0x10
  AVM_PLUS_OBJECT = 0x11 # switch to AMF3

  @property
  def tag(self) -> str:
    return self.name.lower().replace('_', '-')

# length = 0, name = '', value = ObjectEnd
OBJECT_END_SENTINEL = b'\x00\x00\x09'
