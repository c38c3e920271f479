import pytest

from mirusdk.params.errors import InvalidScalarConversionError
from mirusdk.params.parameter_type import ParameterType
from mirusdk.params.scalar import Scalar, scalar_array_as
from mirusdk.type_conversion import FloatKind, IntKind

BOOL_OK = [
    ("true", True), ("True", True), ("TRUE", True), ("yes", True), ("y", True), ("on", True),
    ("false", False), ("False", False), ("no", False), ("n", False), ("off", False), ("OFF", False),
]
BOOL_BAD = ["maybe", "1", "0", "", "truee"]

INT_OK = [
    ("0", 0), ("42", 42), ("-17", -17), ("+8", 8),
    ("9223372036854775807", 9223372036854775807),
    ("-9223372036854775808", -9223372036854775808),
]
INT_BAD = [
    ("4.2", int), ("abc", int), ("12abc", int), ("", int),
    ("9223372036854775808", int), ("-1", IntKind.UINT8), ("256", IntKind.UINT8),
    ("40000", IntKind.INT16),
]

FLOAT_OK = [("3.14", 3.14), ("-2.5", -2.5), ("1e3", 1000.0), (".5", 0.5), ("7", 7.0)]
FLOAT_BAD = [("abc", float), ("1.5x", float), ("", float), ("1e400", float), ("1e39", FloatKind.FLOAT32)]

STRING_OK = [("hello", "hello"), ("", ""), ("42", "42"), ("true", "true")]


def test_equality():
    first = Scalar("true")
    second = Scalar("true")
    assert (first == second) is True
    assert first.as_string() == second.as_string() == "true"


def test_inequality():
    assert (Scalar("true") != Scalar("false")) is True


def test_str_is_value():
    assert str(Scalar("abc")) == "abc"


@pytest.mark.parametrize("text, expected", BOOL_OK)
def test_bool_conversion_success(text, expected):
    scalar = Scalar(text)
    assert scalar.as_bool() is expected
    assert scalar.convert(bool) is expected
    assert scalar.convert(ParameterType.BOOL) is expected


@pytest.mark.parametrize("text", BOOL_BAD)
def test_bool_conversion_failure(text):
    scalar = Scalar(text)
    with pytest.raises(InvalidScalarConversionError):
        scalar.as_bool()
    with pytest.raises(InvalidScalarConversionError):
        scalar.convert(bool)


@pytest.mark.parametrize("text, expected", INT_OK)
def test_int_conversion_success(text, expected):
    scalar = Scalar(text)
    assert scalar.as_int() == expected
    assert scalar.convert(int) == expected
    assert scalar.convert(IntKind.INT64) == expected


@pytest.mark.parametrize("text, target", INT_BAD)
def test_int_conversion_failure(text, target):
    with pytest.raises(InvalidScalarConversionError) as info:
        Scalar(text).convert(target)
    assert f"to {ParameterType.INTEGER}:" in str(info.value)


@pytest.mark.parametrize("text, expected", FLOAT_OK)
def test_double_conversion_success(text, expected):
    scalar = Scalar(text)
    assert scalar.as_double() == expected
    assert scalar.convert(float) == expected


@pytest.mark.parametrize("text, target", FLOAT_BAD)
def test_double_conversion_failure(text, target):
    with pytest.raises(InvalidScalarConversionError) as info:
        Scalar(text).convert(target)
    assert f"to {ParameterType.DOUBLE}:" in str(info.value)


@pytest.mark.parametrize("text, expected", STRING_OK)
def test_string_conversion_success(text, expected):
    scalar = Scalar(text)
    assert scalar.as_string() == expected
    assert scalar.convert(str) == expected


def test_unsupported_target():
    with pytest.raises(TypeError):
        Scalar("1").convert(ParameterType.MAP)


def test_bool_array_conversion_success():
    scalars = [Scalar(text) for text, _ in BOOL_OK]
    assert scalar_array_as(scalars, bool) == [expected for _, expected in BOOL_OK]


@pytest.mark.parametrize("text", BOOL_BAD)
def test_bool_array_conversion_failure(text):
    with pytest.raises(InvalidScalarConversionError):
        scalar_array_as([Scalar(text)], bool)


def test_int_array_conversion_success():
    scalars = [Scalar(text) for text, _ in INT_OK]
    assert scalar_array_as(scalars, int) == [expected for _, expected in INT_OK]


@pytest.mark.parametrize("text, target", INT_BAD)
def test_int_array_conversion_failure(text, target):
    with pytest.raises(InvalidScalarConversionError):
        scalar_array_as([Scalar(text)], target)


def test_double_array_conversion_success():
    scalars = [Scalar(text) for text, _ in FLOAT_OK]
    assert scalar_array_as(scalars, float) == [expected for _, expected in FLOAT_OK]


@pytest.mark.parametrize("text, target", FLOAT_BAD)
def test_double_array_conversion_failure(text, target):
    with pytest.raises(InvalidScalarConversionError):
        scalar_array_as([Scalar(text)], target)


def test_string_array_conversion_success():
    scalars = [Scalar(text) for text, _ in STRING_OK]
    assert scalar_array_as(scalars, str) == [expected for _, expected in STRING_OK]


def test_empty_array_conversion():
    assert scalar_array_as([], int) == []