"""Errors raised while reading parameter values."""

from __future__ import annotations

from mirusdk.errors import MiruError
from mirusdk.params.parameter_type import ParameterType


class InvalidParameterValueTypeError(MiruError):
    """The stored parameter type does not match the requested one."""

    def __init__(self, expected: ParameterType, actual: ParameterType) -> None:
        super().__init__(f"expected [{expected}] got [{actual}]")
        self.expected = expected
        self.actual = actual


class InvalidParameterValueError(MiruError):
    """A parameter value passed in is invalid."""


class InvalidParameterTypeError(MiruError):
    """A named parameter cannot be read as the requested type."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(f"parameter '{name}' has invalid type: {message}")
        self.name = name
        self.reason = message


class InvalidScalarConversionError(MiruError):
    """A scalar string cannot be converted to the requested type."""

    def __init__(self, value: str, dest_type: str, message: str) -> None:
        super().__init__(f"unable to convert scalar '{value}' to {dest_type}: {message}")
        self.value = value
        self.dest_type = dest_type
        self.reason = message