import struct

from amfdec.amf0.errors import UnexpectedEndOfData

class ByteStream:
  def __init__(self, data: bytes | bytearray | memoryview):
    self.data = memoryview(data)
    self.current = 0

  def __len__(self):
    return max(0, len(self.data) - self.current)

  def __bool__(self):
    return len(self) > 0

  def ensure(self, size: int):
    if self.current + size > len(self.data):
      raise UnexpectedEndOfData(size, len(self), self.current)

  def peek(self, size: int):
    return self.data[self.current: self.current + size]

  def read(self, size: int):
    self.ensure(size)
    view = self.data[self.current: self.current + size]
    self.current += size
    return view

  def skip(self, size: int):
    self.ensure(size)
    self.current += size

  def readU8(self):
    self.ensure(1)
    view = self.data[self.current]
    self.current += 1
    return view

  def readU16(self):
    return int.from_bytes(self.read(2), byteorder='big')

  def readU32(self):
    return int.from_bytes(self.read(4), byteorder='big')

  def readS16(self):
    return int.from_bytes(self.read(2), byteorder='big', signed=True)

  def readF64(self) -> float:
    return struct.unpack('>d', self.read(8))[0]
