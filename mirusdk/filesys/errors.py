"""Errors raised for files and directories."""

from __future__ import annotations

from typing import Iterable

from mirusdk.errors import MiruError


def _list(items: Iterable[str]) -> str:
    return "[" + ", ".join(items) + "]"


class FileNotFoundInPathError(MiruError):
    """A file does not exist."""

    def __init__(self, path: str, abs_path: str) -> None:
        super().__init__(f"File '{path}' (absolute path: '{abs_path}') not found")
        self.path = path
        self.abs_path = abs_path


class NotAFileError(MiruError):
    """A path exists but is not a regular file."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File '{path}' exists but is not a file")
        self.path = path


class InvalidFileTypeError(MiruError):
    """A file has an unsupported type."""

    def __init__(self, file_path: str, expected_file_types: Iterable[str]) -> None:
        expected = list(expected_file_types)
        super().__init__(
            f"File '{file_path}' is not a valid file type. "
            f"Expected one of: {_list(expected)}"
        )
        self.file_path = file_path
        self.expected_file_types = expected


class DirNotFoundError(MiruError):
    """A directory does not exist."""

    def __init__(self, path: str, abs_path: str) -> None:
        super().__init__(
            f"Directory '{path}' (absolute path: '{abs_path}') does not exist"
        )
        self.path = path
        self.abs_path = abs_path


class NotADirError(MiruError):
    """A path exists but is not a directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Path '{path}' exists but is not a directory")
        self.path = path


class UnableToFindGitRepoError(MiruError):
    """No enclosing git repository was found."""

    def __init__(self, path: str) -> None:
        super().__init__(f"The path '{path}' is not part of a git repository")
        self.path = path