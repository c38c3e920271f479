"""Composite parameter values: maps, arrays of maps and nested arrays."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Tuple

_DELIMITER = "."


def _key_of(name: str) -> str:
    return name.rpartition(_DELIMITER)[2]


def _wrap_indexed(items: Iterable[Any], wrapped_type: type) -> Tuple[Any, ...]:
    """Turn bare composite values into parameters named by their index."""
    items = list(items)
    if not items or not all(isinstance(item, wrapped_type) for item in items):
        return tuple(items)
    from mirusdk.params.parameter import Parameter
    from mirusdk.params.value import ParameterValue

    return tuple(
        Parameter(str(index), ParameterValue(item)) for index, item in enumerate(items)
    )


def _join(items: Iterable[Any]) -> str:
    return ", ".join(str(item) for item in items)


class Map:
    """A set of named parameters, kept sorted by name."""

    __slots__ = ("_fields",)

    def __init__(self, fields: Iterable[Any] = ()) -> None:
        self._fields = tuple(sorted(fields, key=lambda field: field.name))

    def __getitem__(self, key: str):
        """Return the field whose last name segment is ``key``."""
        for field in self._fields:
            if _key_of(field.name) == key:
                return field
        raise KeyError(key)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Map):
            return NotImplemented
        return self._fields == other._fields

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "{" + _join(self._fields) + "}"

    def __repr__(self) -> str:
        return f"Map({list(self._fields)!r})"


class MapArray:
    """An ordered sequence of map parameters."""

    __slots__ = ("_items",)

    def __init__(self, maps: Iterable[Any] = ()) -> None:
        self._items = _wrap_indexed(maps, Map)

    def __getitem__(self, index: int):
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapArray):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + _join(self._items) + "]"

    def __repr__(self) -> str:
        return f"MapArray({list(self._items)!r})"


class NestedArray:
    """An ordered sequence of array parameters."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = _wrap_indexed(items, NestedArray)

    def __getitem__(self, index: int):
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NestedArray):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + _join(self._items) + "]"

    def __repr__(self) -> str:
        return f"NestedArray({list(self._items)!r})"