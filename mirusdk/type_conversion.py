"""Checked conversions from strings and between numeric widths."""

from __future__ import annotations

import math
import re
import struct
import sys
from enum import Enum
from typing import Iterable, List, Union

from mirusdk.errors import MiruError

_C_WHITESPACE = " \t\n\v\f\r"
_INTEGER = re.compile(r"[+-]?\d+")
_HEX_FLOAT = re.compile(
    r"[+-]?0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?", re.IGNORECASE
)
_DEC_FLOAT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf(?:inity)?|nan(?:\([0-9a-z_]*\))?)",
    re.IGNORECASE,
)


class InvalidTypeConversionError(MiruError):
    """A value could not be converted from one type to another."""

    def __init__(self, value: str, src_type: str, dest_type: str, message: str) -> None:
        super().__init__(
            f"unable to convert value '{value}' from type '{src_type}' "
            f"to type '{dest_type}': {message}"
        )
        self.value = value
        self.src_type = src_type
        self.dest_type = dest_type
        self.reason = message


class IntKind(Enum):
    """Fixed-width integer targets with their ranges."""

    INT8 = ("int8", -(2**7), 2**7 - 1)
    INT16 = ("int16", -(2**15), 2**15 - 1)
    INT32 = ("int32", -(2**31), 2**31 - 1)
    INT64 = ("int64", -(2**63), 2**63 - 1)
    UINT8 = ("uint8", 0, 2**8 - 1)
    UINT16 = ("uint16", 0, 2**16 - 1)
    UINT32 = ("uint32", 0, 2**32 - 1)
    UINT64 = ("uint64", 0, 2**64 - 1)

    def __init__(self, label: str, lowest: int, highest: int) -> None:
        self.label = label
        self.lowest = lowest
        self.highest = highest

    @property
    def unsigned(self) -> bool:
        return self.lowest == 0


class FloatKind(Enum):
    """Floating point targets with their ranges."""

    FLOAT32 = ("float32", 3.4028234663852886e38)
    FLOAT64 = ("float64", sys.float_info.max)

    def __init__(self, label: str, highest: float) -> None:
        self.label = label
        self.highest = highest
        self.lowest = -highest


def yaml_string_to_bool(text: str) -> bool:
    """Interpret a YAML boolean word, case-insensitively."""
    lower = text.lower()
    if lower in ("y", "yes", "true", "on"):
        return True
    if lower in ("n", "no", "false", "off"):
        return False
    raise InvalidTypeConversionError(
        text, "string", "bool", "cannot interpret value as a boolean"
    )


def string_to_int64(text: str) -> int:
    """Parse a base-10 signed 64-bit integer."""
    if "." in text:
        raise InvalidTypeConversionError(
            text,
            "string",
            "int64_t",
            "cannot interpret value as an integer: contains a decimal point",
        )
    stripped = text.lstrip(_C_WHITESPACE)
    match = _INTEGER.match(stripped)
    if match is None:
        raise InvalidTypeConversionError(
            text, "string", "int64_t", "cannot interpret value as an integer: stoll"
        )
    if match.end() != len(stripped):
        raise InvalidTypeConversionError(
            text, "string", "int64_t", "contains invalid characters"
        )
    result = int(match.group(0))
    if not IntKind.INT64.lowest <= result <= IntKind.INT64.highest:
        raise InvalidTypeConversionError(
            text, "string", "int64_t", "cannot interpret value as an integer: stoll"
        )
    return result


def _has_nonzero_mantissa(body: str, is_hex: bool) -> bool:
    lower = body.lower().lstrip("+-")
    if is_hex:
        mantissa = lower[2:].split("p")[0]
        return any(ch not in "0." for ch in mantissa)
    mantissa = lower.split("e")[0]
    return any(ch in "123456789" for ch in mantissa)


def string_to_double(text: str) -> float:
    """Parse a double the way the C library does, rejecting trailing text."""
    out_of_range = InvalidTypeConversionError(
        text, "string", "double", "cannot interpret value as a double: stod"
    )
    stripped = text.lstrip(_C_WHITESPACE)
    is_hex = True
    match = _HEX_FLOAT.match(stripped)
    if match is None:
        is_hex = False
        match = _DEC_FLOAT.match(stripped)
    if match is None:
        raise out_of_range
    if match.end() != len(stripped):
        raise InvalidTypeConversionError(
            text, "string", "double", "contains invalid characters"
        )
    body = match.group(0)
    lower = body.lower()
    if "nan" in lower:
        value = -math.nan if lower.startswith("-") else math.nan
        return value
    try:
        value = float.fromhex(body) if is_hex else float(body)
    except OverflowError:
        raise out_of_range from None
    if math.isinf(value) and "inf" not in lower:
        raise out_of_range
    if abs(value) < sys.float_info.min and _has_nonzero_mantissa(body, is_hex):
        raise out_of_range
    return value


def int64_as(value: int, kind: IntKind) -> int:
    """Check that ``value`` fits the integer ``kind`` and return it."""
    dest = f"integer (type '{kind.label}')"
    if kind.unsigned and value < 0:
        raise InvalidTypeConversionError(
            str(value), "int64_t", dest, "value is negative for unsigned type"
        )
    if value > kind.highest or value < kind.lowest:
        raise InvalidTypeConversionError(
            str(value),
            "int64_t",
            dest,
            f"value outside target integer range [{kind.lowest}, {kind.highest}]",
        )
    return value


def double_as(value: float, kind: FloatKind) -> float:
    """Check that ``value`` fits the floating point ``kind`` and return it."""
    if value > kind.highest or value < kind.lowest:
        raise InvalidTypeConversionError(
            f"{value:f}",
            "double",
            f"floating point (type '{kind.label}')",
            f"value outside target floating point range [{kind.lowest:f}, {kind.highest:f}]",
        )
    if kind is FloatKind.FLOAT32:
        return struct.unpack("f", struct.pack("f", value))[0]
    return value


Target = Union[type, IntKind, FloatKind]


def string_as(text: str, target: Target):
    """Convert ``text`` to ``bool``, ``int``, ``float``, ``str`` or a sized kind."""
    if target is bool:
        return yaml_string_to_bool(text)
    if target is int:
        target = IntKind.INT64
    if isinstance(target, IntKind):
        return int64_as(string_to_int64(text), target)
    if target is float:
        target = FloatKind.FLOAT64
    if isinstance(target, FloatKind):
        return double_as(string_to_double(text), target)
    if target is str:
        return text
    raise TypeError(f"cannot convert a string to {target!r}")


def string_array_as(strings: Iterable[str], target: Target) -> List:
    """Convert every string in ``strings`` with :func:`string_as`."""
    return [string_as(text, target) for text in strings]