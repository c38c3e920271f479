"""Errors raised while loading a configuration."""

from __future__ import annotations

from typing import Iterable

from mirusdk.errors import MiruError
from mirusdk.filesys.file import File


def _list(items: Iterable[str]) -> str:
    return "[" + ", ".join(items) + "]"


class FromAgentOptionsError(MiruError):
    """The options for loading from the agent are invalid."""


class ConfigSlugNotFound(MiruError):
    """The schema file has no config slug."""

    def __init__(self, schema_file: File) -> None:
        super().__init__(
            f"Unable to find config slug in schema file '{schema_file.abs_path()}'"
        )
        self.schema_file = schema_file


class EmptyConfigSlug(MiruError):
    """The schema file's config slug is empty."""

    def __init__(self, schema_file: File) -> None:
        super().__init__(
            f"Config slug is in schema file '{schema_file.abs_path()}' "
            "cannot be empty ('')"
        )
        self.schema_file = schema_file


class InvalidConfigSchemaFileTypeError(MiruError):
    """The schema file has a type that cannot be hashed."""

    def __init__(self, schema_file: File, expected_file_types: Iterable[str]) -> None:
        expected = list(expected_file_types)
        super().__init__(
            f"Invalid config schema file type '{schema_file.abs_path()}'. "
            f"Expected one of: {_list(expected)}"
        )
        self.schema_file = schema_file
        self.expected_file_types = expected


class EmptyConcreteConfig(MiruError):
    """The agent returned no concrete config."""

    def __init__(self, config_slug: str) -> None:
        super().__init__(
            f"The concrete config loaded for config slug '{config_slug}' is empty"
        )
        self.config_slug = config_slug