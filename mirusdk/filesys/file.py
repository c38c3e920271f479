"""Files holding JSON or YAML data."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Iterable, List

import yaml

from mirusdk.filesys.errors import (
    FileNotFoundInPathError,
    InvalidFileTypeError,
    NotAFileError,
)
from mirusdk.filesys.path import FsPath


class FileType(Enum):
    """Structured file formats the package reads."""

    JSON = "JSON"
    YAML = "YAML"

    def __str__(self) -> str:
        return self.value


_EXTENSIONS = {".json": FileType.JSON, ".yaml": FileType.YAML, ".yml": FileType.YAML}
_NAMES = {"json": FileType.JSON, "yaml": FileType.YAML, "yml": FileType.YAML}


def supported_file_types() -> List[FileType]:
    return [FileType.JSON, FileType.YAML]


def file_types_to_strings(file_types: Iterable[FileType]) -> List[str]:
    return [str(file_type) for file_type in file_types]


def string_to_file_type(text: str) -> FileType:
    """Map a case-insensitive type name such as ``"yml"`` to its FileType."""
    lower = text.lower()
    try:
        return _NAMES[lower]
    except KeyError:
        raise InvalidFileTypeError(
            lower, file_types_to_strings(supported_file_types())
        ) from None


class File(FsPath):
    """A file on disk, typed by its extension."""

    __slots__ = ()

    def extension(self) -> str:
        return self.path.suffix

    def file_type(self) -> FileType:
        try:
            return _EXTENSIONS[self.extension()]
        except KeyError:
            raise InvalidFileTypeError(
                str(self.path), file_types_to_strings(supported_file_types())
            ) from None

    def assert_exists(self) -> None:
        if not self.path.exists():
            raise FileNotFoundInPathError(str(self.path), str(self.abs_path()))
        if not self.path.is_file():
            raise NotAFileError(str(self.path))

    def read_bytes(self) -> bytes:
        self.assert_exists()
        return self.path.read_bytes()

    def read_string(self) -> str:
        self.assert_exists()
        return self.path.read_bytes().decode("utf-8")

    def read_json(self) -> Any:
        self.assert_exists()
        if self.file_type() is not FileType.JSON:
            raise InvalidFileTypeError(
                str(self.path), file_types_to_strings([FileType.JSON])
            )
        with self.path.open("r", encoding="utf-8") as stream:
            return json.load(stream)

    def read_yaml(self) -> Any:
        """Read YAML; JSON files are accepted too, JSON being a subset of YAML."""
        self.assert_exists()
        if self.file_type() not in (FileType.YAML, FileType.JSON):
            raise InvalidFileTypeError(
                str(self.path), file_types_to_strings([FileType.YAML])
            )
        with self.path.open("r", encoding="utf-8") as stream:
            return yaml.safe_load(stream)

    def read_structured_data(self) -> Any:
        if self.file_type() is FileType.JSON:
            return self.read_json()
        return self.read_yaml()