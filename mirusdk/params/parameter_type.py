"""Parameter type tags."""

from __future__ import annotations

from enum import IntEnum


class ParameterType(IntEnum):
    """Kind of value a parameter holds."""

    NOT_SET = 0
    BOOL = 1
    INTEGER = 2
    DOUBLE = 3
    STRING = 4
    BOOL_ARRAY = 6
    INTEGER_ARRAY = 7
    DOUBLE_ARRAY = 8
    STRING_ARRAY = 9
    NULL = 128
    SCALAR = 129
    SCALAR_ARRAY = 130
    NESTED_ARRAY = 131
    MAP = 132
    MAP_ARRAY = 133

    def __str__(self) -> str:
        return _NAMES[self]


_NAMES = {
    ParameterType.NOT_SET: "not set",
    ParameterType.BOOL: "bool",
    ParameterType.INTEGER: "integer",
    ParameterType.DOUBLE: "double",
    ParameterType.STRING: "string",
    ParameterType.BOOL_ARRAY: "bool_array",
    ParameterType.INTEGER_ARRAY: "integer_array",
    ParameterType.DOUBLE_ARRAY: "double_array",
    ParameterType.STRING_ARRAY: "string_array",
    ParameterType.NULL: "null",
    ParameterType.SCALAR: "scalar",
    ParameterType.SCALAR_ARRAY: "scalar_array",
    ParameterType.NESTED_ARRAY: "nested_array",
    ParameterType.MAP: "map",
    ParameterType.MAP_ARRAY: "map_array",
}