import math
from collections.abc import Hashable

import pytest

from amfdec.amf0.marker import TypeMarker, OBJECT_END_SENTINEL
from amfdec.amf0.value import Number, Boolean, String, Object, Null, EcmaArray, StrictArray, Date, LongString, XmlDocument, TypedObject


def test_marker_tags():
  assert TypeMarker(0x0A) is TypeMarker.STRICT_ARRAY
  assert TypeMarker.AVM_PLUS_OBJECT.tag == 'avm-plus-object'
  assert OBJECT_END_SENTINEL == b'\x00\x00' + bytes([TypeMarker.OBJECT_END])


def test_variants_are_distinct():
  assert String('a') != LongString('a')
  assert LongString('a') != XmlDocument('a')
  assert Object({}) != EcmaArray({})
  assert TypedObject({}, class_name='A') != TypedObject({}, class_name='B')


def test_describe_nested():
  value = TypedObject({'items': StrictArray([Boolean(True), Null()]), 'at': Date(0.0)}, class_name='Event')
  assert value.describe() == {
    'type': 'typed-object',
    'class_name': 'Event',
    'fields': {
      'items': {'type': 'strict-array', 'items': [{'type': 'boolean', 'value': True}, {'type': 'null'}]},
      'at': {'type': 'date', 'milliseconds': 0.0, 'timezone': 0, 'datetime': '1970-01-01T00:00:00+00:00'},
    },
  }


def test_describe_out_of_range_date():
  assert Date(math.nan).describe()['datetime'] is None
  assert Date(1e300).describe()['datetime'] is None


def test_native():
  value = EcmaArray({'width': Number(1920.0), 'encoder': String('obs')})
  assert value.native() == {'width': 1920.0, 'encoder': 'obs'}
  assert 'width' in value
  assert value['encoder'] == String('obs')


def test_native_out_of_range_date_keeps_milliseconds():
  assert Date(1e20).native() == 1e20
  assert Date(-math.inf).native() == -math.inf


def test_containers_are_unhashable():
  for value in [Object({}), EcmaArray({}), TypedObject({}, class_name='A'), StrictArray([])]:
    assert not isinstance(value, Hashable)
    with pytest.raises(TypeError):
      hash(value)


def test_scalars_are_hashable():
  assert len({Number(1.0), Number(1.0), String('a'), Date(0.0), Null()}) == 4
