"""Base class for file system locations."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class FsPath:
    """A location on the file system, kept as given."""

    __slots__ = ("_path",)

    def __init__(self, path: PathLike) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def abs_path(self) -> Path:
        """Absolute path with ``..`` and trailing separators removed lexically."""
        return Path(os.path.abspath(self._path))

    def name(self) -> str:
        return self._path.name

    def __fspath__(self) -> str:
        return os.fspath(self._path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FsPath):
            return NotImplemented
        return type(self) is type(other) and self._path == other._path

    def __hash__(self) -> int:
        return hash((type(self), self._path))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"