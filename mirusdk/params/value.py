"""Typed storage for a single parameter's value."""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, get_args, get_origin

from mirusdk.params.composite import Map, MapArray, NestedArray
from mirusdk.params.errors import (
    InvalidParameterValueError,
    InvalidParameterValueTypeError,
)
from mirusdk.params.parameter_type import ParameterType
from mirusdk.params.scalar import Scalar, scalar_array_as
from mirusdk.type_conversion import FloatKind, IntKind, double_as, int64_as

_UNSET = object()

_PRIMITIVES = (
    ParameterType.BOOL,
    ParameterType.INTEGER,
    ParameterType.DOUBLE,
    ParameterType.STRING,
)

_ARRAY_ELEMENTS = {
    ParameterType.BOOL_ARRAY: bool,
    ParameterType.INTEGER_ARRAY: int,
    ParameterType.DOUBLE_ARRAY: float,
    ParameterType.STRING_ARRAY: str,
    ParameterType.SCALAR_ARRAY: Scalar,
}

_ELEMENT_ARRAYS = {element: kind for kind, element in _ARRAY_ELEMENTS.items()}

_EXACT_TYPES = {
    Scalar: ParameterType.SCALAR,
    Map: ParameterType.MAP,
    MapArray: ParameterType.MAP_ARRAY,
    NestedArray: ParameterType.NESTED_ARRAY,
}

_ARRAY_TYPES = frozenset(_ARRAY_ELEMENTS) | {
    ParameterType.NESTED_ARRAY,
    ParameterType.MAP_ARRAY,
}


def _check_int64(value: int) -> int:
    if not IntKind.INT64.lowest <= value <= IntKind.INT64.highest:
        raise InvalidParameterValueError(f"integer {value} does not fit in 64 bits")
    return int(value)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _infer_array_kind(items: Tuple[Any, ...]) -> ParameterType:
    if not items:
        return ParameterType.SCALAR_ARRAY
    if all(isinstance(item, bool) for item in items):
        return ParameterType.BOOL_ARRAY
    if all(_is_int(item) for item in items):
        return ParameterType.INTEGER_ARRAY
    if all(_is_int(item) or isinstance(item, float) for item in items):
        return ParameterType.DOUBLE_ARRAY
    if all(isinstance(item, str) for item in items):
        return ParameterType.STRING_ARRAY
    if all(isinstance(item, Scalar) for item in items):
        return ParameterType.SCALAR_ARRAY
    raise InvalidParameterValueError(f"array elements of mixed types: {list(items)!r}")


def _array_item(item: Any, kind: ParameterType) -> Any:
    element = _ARRAY_ELEMENTS[kind]
    if element is bool and isinstance(item, bool):
        return item
    if element is int and _is_int(item):
        return _check_int64(item)
    if element is float and (_is_int(item) or isinstance(item, float)):
        return float(item)
    if element is str and isinstance(item, str):
        return item
    if element is Scalar and isinstance(item, Scalar):
        return item
    raise InvalidParameterValueError(f"{item!r} is not a valid element of [{kind}]")


def _classify(value: Any, array_kind: Optional[ParameterType]) -> Tuple[ParameterType, Any]:
    if value is _UNSET:
        return ParameterType.NOT_SET, None
    if value is None:
        return ParameterType.NULL, None
    if isinstance(value, bool):
        return ParameterType.BOOL, value
    if isinstance(value, int):
        return ParameterType.INTEGER, _check_int64(value)
    if isinstance(value, float):
        return ParameterType.DOUBLE, value
    if isinstance(value, str):
        return ParameterType.STRING, value
    for cls, kind in _EXACT_TYPES.items():
        if isinstance(value, cls):
            return kind, value
    if isinstance(value, (list, tuple)):
        items = tuple(value)
        kind = array_kind if array_kind is not None else _infer_array_kind(items)
        if kind not in _ARRAY_ELEMENTS:
            raise InvalidParameterValueError(f"[{kind}] is not a flat array type")
        return kind, tuple(_array_item(item, kind) for item in items)
    raise InvalidParameterValueError(f"unsupported parameter value {value!r}")


def _item_str(item: Any) -> str:
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, float):
        return repr(item)
    return str(item)


class ParameterValue:
    """A value tagged with its :class:`ParameterType`.

    With no argument the type is ``NOT_SET``; ``None`` gives ``NULL``.
    ``array_kind`` fixes the type of a list, which is otherwise inferred
    from its elements (an empty list is a scalar array).
    """

    __slots__ = ("_type", "_value", "_cache")

    def __init__(self, value: Any = _UNSET, array_kind: Optional[ParameterType] = None) -> None:
        if isinstance(value, ParameterValue):
            self._type, self._value = value._type, value._value
        else:
            self._type, self._value = _classify(value, array_kind)
        self._cache: Dict[ParameterType, Tuple[Any, ...]] = {}

    @property
    def type(self) -> ParameterType:
        """The type of the stored value."""
        return self._type

    def get(self, target):
        """Return the value as ``target``.

        ``target`` is a ParameterType, ``bool``, ``int``, ``float``, ``str``,
        an IntKind or FloatKind, ``None``, Scalar, Map, MapArray, NestedArray
        or ``list[...]`` of bool, int, float, str or Scalar.
        """
        if isinstance(target, ParameterType):
            return self._get_tagged(target)
        if target is bool:
            return self._get_tagged(ParameterType.BOOL)
        if target is int:
            return self._get_tagged(ParameterType.INTEGER)
        if isinstance(target, IntKind):
            return int64_as(self._get_tagged(ParameterType.INTEGER), target)
        if target is float:
            return self._get_tagged(ParameterType.DOUBLE)
        if isinstance(target, FloatKind):
            return double_as(self._get_tagged(ParameterType.DOUBLE), target)
        if target is str:
            return self._get_tagged(ParameterType.STRING)
        if target is None or target is type(None):
            return self._get_tagged(ParameterType.NULL)
        if target in _EXACT_TYPES:
            return self._get_tagged(_EXACT_TYPES[target])
        if get_origin(target) is list:
            args = get_args(target)
            if len(args) == 1 and args[0] in _ELEMENT_ARRAYS:
                return self._get_tagged(_ELEMENT_ARRAYS[args[0]])
        raise TypeError(f"a parameter value cannot be read as {target!r}")

    def _get_tagged(self, target: ParameterType):
        actual = self._type
        if target in _PRIMITIVES:
            if actual == target:
                return self._value
            if actual == ParameterType.SCALAR:
                return self._value.convert(target)
            raise InvalidParameterValueTypeError(target, actual)
        if target in _ARRAY_ELEMENTS:
            if actual == target:
                return list(self._value)
            if actual == ParameterType.SCALAR_ARRAY:
                if target not in self._cache:
                    self._cache[target] = tuple(
                        scalar_array_as(self._value, _ARRAY_ELEMENTS[target])
                    )
                return list(self._cache[target])
            raise InvalidParameterValueTypeError(target, actual)
        if target == ParameterType.NOT_SET:
            raise TypeError("a parameter value cannot be read as [not set]")
        if actual != target:
            raise InvalidParameterValueTypeError(target, actual)
        return self._value

    def is_null(self) -> bool:
        return self._type == ParameterType.NULL

    def is_scalar(self) -> bool:
        return self._type == ParameterType.SCALAR

    def is_map(self) -> bool:
        return self._type == ParameterType.MAP

    def is_scalar_array(self) -> bool:
        return self._type == ParameterType.SCALAR_ARRAY

    def is_nested_array(self) -> bool:
        return self._type == ParameterType.NESTED_ARRAY

    def is_map_array(self) -> bool:
        return self._type == ParameterType.MAP_ARRAY

    def is_array(self) -> bool:
        return self._type in _ARRAY_TYPES

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterValue):
            return NotImplemented
        return self._type == other._type and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        kind = self._type
        if kind == ParameterType.NOT_SET:
            return "not set"
        if kind == ParameterType.NULL:
            return "null"
        if kind in _ARRAY_ELEMENTS:
            return "[" + ", ".join(_item_str(item) for item in self._value) + "]"
        return _item_str(self._value)

    def __repr__(self) -> str:
        if self._type == ParameterType.NOT_SET:
            return "ParameterValue()"
        return f"ParameterValue({self._value!r}, type={self._type.name})"