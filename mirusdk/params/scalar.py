"""Untyped scalar values as read from YAML, converted on demand."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from mirusdk.params.errors import InvalidScalarConversionError
from mirusdk.params.parameter_type import ParameterType
from mirusdk.type_conversion import (
    FloatKind,
    IntKind,
    InvalidTypeConversionError,
    string_as,
)

_PARAMETER_TYPE_TARGETS = {
    ParameterType.BOOL: bool,
    ParameterType.INTEGER: int,
    ParameterType.DOUBLE: float,
    ParameterType.STRING: str,
}


@dataclass(frozen=True)
class Scalar:
    """A scalar kept as its source text."""

    value: str

    def __str__(self) -> str:
        return self.value

    def as_bool(self) -> bool:
        return self.convert(bool)

    def as_int(self) -> int:
        return self.convert(int)

    def as_double(self) -> float:
        return self.convert(float)

    def as_string(self) -> str:
        return self.value

    def convert(self, target):
        """Convert to ``bool``, ``int``, ``float``, ``str``, a sized kind or a ParameterType."""
        if isinstance(target, ParameterType):
            try:
                target = _PARAMETER_TYPE_TARGETS[target]
            except KeyError:
                raise TypeError(f"a scalar cannot be read as [{target}]") from None
        if target is str:
            return self.value
        if target is bool:
            dest = ParameterType.BOOL
        elif target is int or isinstance(target, IntKind):
            dest = ParameterType.INTEGER
        elif target is float or isinstance(target, FloatKind):
            dest = ParameterType.DOUBLE
        else:
            raise TypeError(f"a scalar cannot be converted to {target!r}")
        try:
            return string_as(self.value, target)
        except InvalidTypeConversionError as exc:
            raise InvalidScalarConversionError(self.value, str(dest), str(exc)) from exc


def scalar_array_as(scalars: Iterable[Scalar], target) -> List:
    """Convert each scalar with :meth:`Scalar.convert`."""
    return [scalar.convert(target) for scalar in scalars]