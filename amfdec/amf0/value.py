import struct
from dataclasses import dataclass, field
from datetime import datetime, timezone, timedelta
from typing import Any, ClassVar

from amfdec.amf0.marker import TypeMarker

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

def same_double(a: float, b: float) -> bool:
  # bit pattern comparison, so NaN payloads and signed zeros stay distinct
  return struct.pack('>d', a) == struct.pack('>d', b)

class Value:
  marker: ClassVar[TypeMarker]

  def native(self) -> Any:
    return None

  def describe(self) -> dict[str, Any]:
    return {'type': self.marker.tag}

@dataclass(frozen=True, eq=False)
class Number(Value):
  marker: ClassVar[TypeMarker] = TypeMarker.NUMBER
  value: float

  def __eq__(self, other):
    if not isinstance(other, Number): return NotImplemented
    return same_double(self.value, other.value)

  def __hash__(self):
    return hash(struct.pack('>d', self.value))

  def native(self):
    return self.value

  def describe(self):
    return {'type': self.marker.tag, 'value': self.value}

@dataclass(frozen=True)
class Boolean(Value):
  marker: ClassVar[TypeMarker] = TypeMarker.BOOLEAN
  value: bool

  def native(self):
    return self.value

  def describe(self):
    return {'type': self.marker.tag, 'value': self.value}

@dataclass(frozen=True)
class String(Value):
  marker: ClassVar[TypeMarker] = TypeMarker.STRING
  value: str

  def native(self):
    return self.value

  def describe(self):
    return {'type': self.marker.tag, 'value': self.value}

@dataclass(frozen=True)
class LongString(String):
  marker: ClassVar[TypeMarker] = TypeMarker.LONG_STRING

@dataclass(frozen=True)
class XmlDocument(String):
  marker: ClassVar[TypeMarker] = TypeMarker.XML_DOCUMENT

@dataclass(frozen=True)
class Object(Value):
  marker: ClassVar[TypeMarker] = TypeMarker.OBJECT
  fields: dict[str, Value] = field(default_factory=dict)
  __hash__ = None # mutable dict payload

  def __getitem__(self, name: str) -> Value:
    return self.fields[name]

  def __contains__(self, name: str) -> bool:
    return name in self.fields

  def native(self):
    return { name: value.native() for name, value in self.fields.items() }

  def describe(self):
    return {'type': self.marker.tag, 'fields': { name: value.describe() for name, value in self.fields.items() }}

@dataclass(frozen=True)
class EcmaArray(Object):
  marker: ClassVar[TypeMarker] = TypeMarker.ECMA_ARRAY
  __hash__ = None

@dataclass(frozen=True)
class TypedObject(Object):
  marker: ClassVar[TypeMarker] = TypeMarker.TYPED_OBJECT
  class_name: str = ''
  __hash__ = None

  def describe(self):
    return {'type': self.marker.tag, 'class_name': self.class_name, 'fields': { name: value.describe() for name, value in self.fields.items() }}

@dataclass(frozen=True)
class StrictArray(Value):
  marker: ClassVar[TypeMarker] = TypeMarker.STRICT_ARRAY
  items: list[Value] = field(default_factory=list)
  __hash__ = None # mutable list payload

  def __len__(self):
    return len(self.items)

  def __getitem__(self, index: int) -> Value:
    return self.items[index]

  def native(self):
    return [item.native() for item in self.items]

  def describe(self):
    return {'type': self.marker.tag, 'items': [item.describe() for item in self.items]}

@dataclass(frozen=True, eq=False)
class Date(Value):
  marker: ClassVar[TypeMarker] = TypeMarker.DATE
  milliseconds: float
  timezone: int = 0 # should be set zero, kept only for inspection

  def __eq__(self, other):
    if not isinstance(other, Date): return NotImplemented
    return same_double(self.milliseconds, other.milliseconds) and self.timezone == other.timezone

  def __hash__(self):
    return hash((struct.pack('>d', self.milliseconds), self.timezone))

  @property
  def datetime(self) -> datetime:
    return EPOCH + timedelta(seconds=self.milliseconds / 1000)

  def safe_datetime(self):
    try:
      return self.datetime
    except (OverflowError, ValueError): # NaN, infinity or beyond datetime range
      return None

  def native(self):
    # raw milliseconds when the instant does not fit a datetime
    instant = self.safe_datetime()
    return self.milliseconds if instant is None else instant

  def describe(self):
    instant = self.safe_datetime()
    iso = None if instant is None else instant.isoformat()
    return {'type': self.marker.tag, 'milliseconds': self.milliseconds, 'timezone': self.timezone, 'datetime': iso}

@dataclass(frozen=True)
class Reference(Value):
  marker: ClassVar[TypeMarker] = TypeMarker.REFERENCE
  index: int

  def native(self):
    return self.index

  def describe(self):
    return {'type': self.marker.tag, 'index': self.index}

@dataclass(frozen=True)
class Null(Value):
  marker: ClassVar[TypeMarker] = TypeMarker.NULL

@dataclass(frozen=True)
class Undefined(Value):
  marker: ClassVar[TypeMarker] = TypeMarker.UNDEFINED

@dataclass(frozen=True)
class Unsupported(Value):
  marker: ClassVar[TypeMarker] = TypeMarker.UNSUPPORTED
