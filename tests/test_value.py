from dataclasses import dataclass

import pytest

from mirusdk.params.composite import Map, MapArray, NestedArray
from mirusdk.params.errors import (
    InvalidParameterValueError,
    InvalidParameterValueTypeError,
    InvalidScalarConversionError,
)
from mirusdk.params.parameter_type import ParameterType
from mirusdk.params.scalar import Scalar
from mirusdk.params.value import ParameterValue
from mirusdk.type_conversion import FloatKind, IntKind, InvalidTypeConversionError


@dataclass(frozen=True)
class Field:
    name: str
    value: object = None


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, ParameterType.BOOL),
        (42, ParameterType.INTEGER),
        (42.3, ParameterType.DOUBLE),
        ("hello", ParameterType.STRING),
        (None, ParameterType.NULL),
        (Scalar("67"), ParameterType.SCALAR),
        ([True, False], ParameterType.BOOL_ARRAY),
        ([104, 42, 97], ParameterType.INTEGER_ARRAY),
        ([104.0, 42.0], ParameterType.DOUBLE_ARRAY),
        (["hello", "world"], ParameterType.STRING_ARRAY),
        ([Scalar("1.0"), Scalar("2.0")], ParameterType.SCALAR_ARRAY),
        (Map([Field("key1")]), ParameterType.MAP),
        (MapArray([Field("0")]), ParameterType.MAP_ARRAY),
        (NestedArray([Field("0")]), ParameterType.NESTED_ARRAY),
    ],
)
def test_type_is_inferred(value, expected):
    assert ParameterValue(value).type == expected


def test_default_is_not_set():
    value = ParameterValue()
    assert value.type == ParameterType.NOT_SET
    assert str(value) == "not set"


def test_null_value():
    value = ParameterValue(None)
    assert value.is_null()
    assert value.get(None) is None
    assert value.get(ParameterType.NULL) is None
    assert str(value) == "null"


@pytest.mark.parametrize(
    "value, target",
    [(True, bool), (42, int), (42.3, float), ("hello", str)],
)
def test_primitive_round_trip(value, target):
    assert ParameterValue(value).get(target) == value


def test_wrong_type_raises():
    with pytest.raises(InvalidParameterValueTypeError):
        ParameterValue(True).get(int)
    with pytest.raises(InvalidParameterValueTypeError):
        ParameterValue(42).get(float)
    with pytest.raises(InvalidParameterValueTypeError):
        ParameterValue(42.3).get(Map)


def test_sized_integer_conversion():
    assert ParameterValue(100).get(IntKind.INT8) == 100
    with pytest.raises(InvalidTypeConversionError):
        ParameterValue(300).get(IntKind.INT8)
    with pytest.raises(InvalidTypeConversionError):
        ParameterValue(-1).get(IntKind.UINT32)


def test_sized_float_conversion():
    assert ParameterValue(42.5).get(FloatKind.FLOAT32) == 42.5
    with pytest.raises(InvalidTypeConversionError):
        ParameterValue(1e300).get(FloatKind.FLOAT32)


def test_scalar_converts_on_demand():
    value = ParameterValue(Scalar("42"))
    assert value.get(int) == 42
    assert value.get(float) == 42.0
    assert value.get(str) == "42"
    assert value.get(Scalar) == Scalar("42")
    with pytest.raises(InvalidScalarConversionError):
        value.get(bool)


def test_scalar_array_conversion():
    value = ParameterValue([Scalar("1"), Scalar("2")])
    assert value.get(list[int]) == [1, 2]
    assert value.get(ParameterType.STRING_ARRAY) == ["1", "2"]
    assert value.get(list[Scalar]) == [Scalar("1"), Scalar("2")]
    with pytest.raises(InvalidScalarConversionError):
        value.get(list[bool])


def test_scalar_array_cache_is_not_shared_with_caller():
    value = ParameterValue([Scalar("1"), Scalar("2")])
    first = value.get(list[int])
    first.append(99)
    assert value.get(list[int]) == [1, 2]


def test_typed_arrays():
    assert ParameterValue([True, False]).get(list[bool]) == [True, False]
    assert ParameterValue([104, 42, 97]).get(list[int]) == [104, 42, 97]
    assert ParameterValue(["hello", "world"]).get(list[str]) == ["hello", "world"]
    with pytest.raises(InvalidParameterValueTypeError):
        ParameterValue([104, 42, 97]).get(list[float])


def test_mixed_numbers_become_doubles():
    value = ParameterValue([1, 2.5])
    assert value.type == ParameterType.DOUBLE_ARRAY
    assert value.get(list[float]) == [1.0, 2.5]


def test_explicit_array_kind():
    value = ParameterValue([], array_kind=ParameterType.INTEGER_ARRAY)
    assert value.get(list[int]) == []
    with pytest.raises(InvalidParameterValueError):
        ParameterValue(["a"], array_kind=ParameterType.INTEGER_ARRAY)


def test_invalid_values_raise():
    with pytest.raises(InvalidParameterValueError):
        ParameterValue(["a", 1])
    with pytest.raises(InvalidParameterValueError):
        ParameterValue(2**63)
    with pytest.raises(InvalidParameterValueError):
        ParameterValue(object())


def test_composite_access():
    fields = Map([Field("key1", "value1"), Field("key2", "value2")])
    value = ParameterValue(fields)
    assert value.get(Map) == fields
    assert value.get(ParameterType.MAP) is fields
    assert value.is_map()
    assert not value.is_array()
    with pytest.raises(InvalidParameterValueTypeError):
        value.get(MapArray)


def test_predicates():
    assert ParameterValue(Scalar("1")).is_scalar()
    assert ParameterValue([Scalar("1")]).is_scalar_array()
    assert ParameterValue([Scalar("1")]).is_array()
    assert ParameterValue(NestedArray([Field("0")])).is_nested_array()
    assert ParameterValue(MapArray([Field("0")])).is_map_array()
    assert ParameterValue([1, 2]).is_array()
    assert not ParameterValue(1).is_array()


def test_equality():
    assert ParameterValue(5) == ParameterValue(5)
    assert ParameterValue(ParameterValue(5)) == ParameterValue(5)
    assert (ParameterValue(1) == ParameterValue(True)) is False
    assert (ParameterValue(Scalar("true")) == ParameterValue(Scalar("false"))) is False


def test_not_set_target_raises():
    with pytest.raises(TypeError):
        ParameterValue(1).get(ParameterType.NOT_SET)


def test_unsupported_target_raises():
    with pytest.raises(TypeError):
        ParameterValue(1).get(dict)


def test_string_forms():
    assert str(ParameterValue("hello")) == "hello"
    assert str(ParameterValue(Scalar("67"))) == "67"
    assert str(ParameterValue(True)) == "true"
    assert str(ParameterValue([104, 42])) == "[104, 42]"