"""Named parameters in a configuration tree."""

from __future__ import annotations

from typing import Any, List

from mirusdk.params.composite import Map, MapArray, NestedArray
from mirusdk.params.errors import (
    InvalidParameterTypeError,
    InvalidParameterValueTypeError,
    InvalidScalarConversionError,
)
from mirusdk.params.parameter_type import ParameterType
from mirusdk.params.scalar import Scalar
from mirusdk.params.value import ParameterValue
from mirusdk.type_conversion import InvalidTypeConversionError

DELIMITER = "."

_MISSING = object()


class Parameter:
    """A value together with its full dotted name from the root of the config."""

    __slots__ = ("_name", "_value")

    def __init__(self, name: str = "", value: Any = _MISSING) -> None:
        self._name = name
        self._value = ParameterValue() if value is _MISSING else ParameterValue(value)

    @property
    def name(self) -> str:
        """Full name of the parameter from the root of the config tree."""
        return self._name

    @property
    def type(self) -> ParameterType:
        return self._value.type

    @property
    def value(self) -> ParameterValue:
        return self._value

    @property
    def key(self) -> str:
        """Last segment of the name."""
        return self._name.rpartition(DELIMITER)[2]

    @property
    def parent_name(self) -> str:
        """Name of the enclosing parameter, empty at the root."""
        return self._name.rpartition(DELIMITER)[0]

    def get_value(self, target):
        """Return the value as ``target`` (see :meth:`ParameterValue.get`)."""
        try:
            return self._value.get(target)
        except (
            InvalidParameterValueTypeError,
            InvalidScalarConversionError,
            InvalidTypeConversionError,
        ) as exc:
            raise InvalidParameterTypeError(self._name, str(exc)) from exc

    def as_bool(self) -> bool:
        return self.get_value(ParameterType.BOOL)

    def as_int(self) -> int:
        return self.get_value(ParameterType.INTEGER)

    def as_double(self) -> float:
        return self.get_value(ParameterType.DOUBLE)

    def as_string(self) -> str:
        return self.get_value(ParameterType.STRING)

    def as_bool_array(self) -> List[bool]:
        return self.get_value(ParameterType.BOOL_ARRAY)

    def as_integer_array(self) -> List[int]:
        return self.get_value(ParameterType.INTEGER_ARRAY)

    def as_double_array(self) -> List[float]:
        return self.get_value(ParameterType.DOUBLE_ARRAY)

    def as_string_array(self) -> List[str]:
        return self.get_value(ParameterType.STRING_ARRAY)

    def as_null(self) -> None:
        return self.get_value(ParameterType.NULL)

    def as_scalar(self) -> Scalar:
        return self.get_value(ParameterType.SCALAR)

    def as_scalar_array(self) -> List[Scalar]:
        return self.get_value(ParameterType.SCALAR_ARRAY)

    def as_nested_array(self) -> NestedArray:
        return self.get_value(ParameterType.NESTED_ARRAY)

    def as_map(self) -> Map:
        return self.get_value(ParameterType.MAP)

    def as_map_array(self) -> MapArray:
        return self.get_value(ParameterType.MAP_ARRAY)

    def value_to_string(self) -> str:
        return str(self._value)

    def is_null(self) -> bool:
        return self._value.is_null()

    def is_scalar(self) -> bool:
        return self._value.is_scalar()

    def is_scalar_array(self) -> bool:
        return self._value.is_scalar_array()

    def is_nested_array(self) -> bool:
        return self._value.is_nested_array()

    def is_map(self) -> bool:
        return self._value.is_map()

    def is_map_array(self) -> bool:
        return self._value.is_map_array()

    def is_array(self) -> bool:
        return self._value.is_array()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parameter):
            return NotImplemented
        return self._name == other._name and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self._name}: {self.value_to_string()}"

    def __repr__(self) -> str:
        return f"Parameter({self._name!r}, {self._value!r})"