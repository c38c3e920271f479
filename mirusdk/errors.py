"""Base error type shared by the package and source-location formatting."""

from __future__ import annotations

from typing import Optional, Tuple

Trace = Tuple[str, int, str]


def format_source_location(file, line, function) -> str:
    """Return the location note that is appended to error messages."""
    return f"\n at {file}:{line} in {function}"


class MiruError(RuntimeError):
    """Base class of every error raised by the package.

    When ``trace`` is given as ``(file, line, function)`` the location is
    appended to the message.
    """

    def __init__(self, message: str, trace: Optional[Trace] = None) -> None:
        if trace is not None:
            message += format_source_location(*trace)
        super().__init__(message)
        self.message = message