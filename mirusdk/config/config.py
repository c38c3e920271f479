"""Configurations loaded from files or from the on-device agent."""

from __future__ import annotations

import base64
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Protocol

from mirusdk.config.errors import (
    ConfigSlugNotFound,
    EmptyConcreteConfig,
    EmptyConfigSlug,
    FromAgentOptionsError,
    InvalidConfigSchemaFileTypeError,
)
from mirusdk.errors import MiruError
from mirusdk.filesys.file import File, FileType
from mirusdk.filesys.path import PathLike
from mirusdk.params.composite import Map, MapArray, NestedArray
from mirusdk.params.errors import InvalidParameterValueError
from mirusdk.params.parameter import DELIMITER, Parameter
from mirusdk.params.scalar import Scalar

MIRU_CONFIG_SLUG_FIELD = "$miru_config_slug"

_LEAF_TYPES = (bool, int, float, str, type(None))


class ConfigSource(Enum):
    """Where a configuration was loaded from."""

    AGENT = "agent"
    FILE_SYSTEM = "file_system"


@dataclass
class FromAgentOptions:
    """How to load a configuration from the agent.

    ``retry_delay`` is in seconds.
    """

    num_retries: int = 3
    retry_delay: float = 0.5
    default_config_path: Optional[str] = None


class AgentClient(Protocol):
    """What the loader needs from a connection to the agent."""

    def hash_schema(self, schema_format: FileType, schema_base64: str) -> str:
        ...

    def refresh_latest_concrete_config(self, schema_digest: str, config_slug: str) -> Any:
        ...

    def get_latest_concrete_config(self, schema_digest: str, config_slug: str) -> Any:
        ...


@dataclass(frozen=True)
class Config:
    """A loaded configuration with its parameter tree."""

    schema_file: File
    config_slug: str
    source: ConfigSource
    root_parameter: Parameter
    schema_digest: Optional[str] = None
    config_file: Optional[File] = None

    @classmethod
    def from_file(
        cls, schema_file_path: PathLike, concrete_config_file_path: PathLike
    ) -> "Config":
        """Load the schema and the concrete config from the file system."""
        from mirusdk.config.builder import ConfigBuilder

        builder = ConfigBuilder().with_source(ConfigSource.FILE_SYSTEM)
        schema_file = File(schema_file_path)
        builder.with_schema_file(schema_file)
        config_slug = read_schema_config_slug(schema_file)
        builder.with_config_slug(config_slug)

        concrete_file = File(concrete_config_file_path)
        builder.with_concrete_config_file(concrete_file)
        builder.with_data(_to_parameter(config_slug, concrete_file.read_structured_data()))
        return builder.build()

    @classmethod
    def from_agent(
        cls,
        schema_file_path: PathLike,
        client: AgentClient,
        options: Optional[FromAgentOptions] = None,
    ) -> "Config":
        """Load the concrete config for a schema from the agent, with retries.

        If every attempt fails and ``options.default_config_path`` is set, that
        file is loaded instead; otherwise the last error is raised.
        """
        options = options if options is not None else FromAgentOptions()
        if options.num_retries < 1:
            raise FromAgentOptionsError("Number of retries must be greater than 0")

        last_error: Optional[Exception] = None
        for attempt in range(1, options.num_retries + 1):
            try:
                return _from_agent_once(client, schema_file_path)
            except Exception as exc:
                last_error = exc
            if attempt < options.num_retries:
                time.sleep(options.retry_delay)

        if options.default_config_path is not None:
            try:
                return cls.from_file(schema_file_path, options.default_config_path)
            except Exception:
                pass

        assert last_error is not None
        raise last_error


def _slug_text(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return None


def read_schema_config_slug(schema_file: File) -> str:
    """Return the config slug declared in a JSON or YAML schema file."""
    file_type = schema_file.file_type()
    if file_type is FileType.JSON:
        content = schema_file.read_json()
        if not isinstance(content, dict) or MIRU_CONFIG_SLUG_FIELD not in content:
            raise ConfigSlugNotFound(schema_file)
        value = content[MIRU_CONFIG_SLUG_FIELD]
        if not isinstance(value, str):
            raise MiruError(
                f"Config slug in schema file '{schema_file.abs_path()}' must be a string"
            )
        config_slug = value
    else:
        content = schema_file.read_yaml()
        if not isinstance(content, dict) or content.get(MIRU_CONFIG_SLUG_FIELD) is None:
            raise ConfigSlugNotFound(schema_file)
        text = _slug_text(content[MIRU_CONFIG_SLUG_FIELD])
        if text is None:
            raise MiruError(
                f"Config slug in schema file '{schema_file.abs_path()}' must be a scalar"
            )
        config_slug = text
    if not config_slug:
        raise EmptyConfigSlug(schema_file)
    return config_slug


def _hash_schema(client: AgentClient, schema_file: File) -> str:
    file_type = schema_file.file_type()
    if file_type not in (FileType.JSON, FileType.YAML):
        raise InvalidConfigSchemaFileTypeError(schema_file, ["json", "yaml"])
    encoded = base64.b64encode(schema_file.read_bytes()).decode("ascii")
    return client.hash_schema(file_type, encoded)


def _latest_concrete_config(client: AgentClient, schema_digest: str, config_slug: str) -> Any:
    try:
        data = client.refresh_latest_concrete_config(schema_digest, config_slug)
    except Exception:
        data = client.get_latest_concrete_config(schema_digest, config_slug)
    if data is None:
        raise EmptyConcreteConfig(config_slug)
    return data


def _from_agent_once(client: AgentClient, schema_file_path: PathLike) -> Config:
    from mirusdk.config.builder import ConfigBuilder

    builder = ConfigBuilder().with_source(ConfigSource.AGENT)
    schema_file = File(schema_file_path)
    builder.with_schema_file(schema_file)
    config_slug = read_schema_config_slug(schema_file)
    builder.with_config_slug(config_slug)

    schema_digest = _hash_schema(client, schema_file)
    builder.with_schema_digest(schema_digest)

    data = _latest_concrete_config(client, schema_digest, config_slug)
    builder.with_data(_to_parameter(config_slug, data))
    return builder.build()


def _child_name(name: str, key: Any) -> str:
    return f"{name}{DELIMITER}{key}" if name else str(key)


def _leaf_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def _to_parameter(name: str, data: Any) -> Parameter:
    """Build a parameter tree from data read from JSON or YAML."""
    if isinstance(data, dict):
        return Parameter(
            name,
            Map(_to_parameter(_child_name(name, key), value) for key, value in data.items()),
        )
    if isinstance(data, list):
        if data and all(isinstance(item, dict) for item in data):
            return Parameter(
                name,
                MapArray(
                    _to_parameter(_child_name(name, index), item)
                    for index, item in enumerate(data)
                ),
            )
        if data and all(isinstance(item, list) for item in data):
            return Parameter(
                name,
                NestedArray(
                    _to_parameter(_child_name(name, index), item)
                    for index, item in enumerate(data)
                ),
            )
        if any(isinstance(item, (dict, list)) for item in data):
            raise InvalidParameterValueError(
                f"array '{name}' mixes composite and primitive elements"
            )
        items = [item if isinstance(item, _LEAF_TYPES) else str(item) for item in data]
        try:
            return Parameter(name, items)
        except InvalidParameterValueError:
            return Parameter(name, [Scalar(_leaf_text(item)) for item in items])
    if not isinstance(data, _LEAF_TYPES):
        data = str(data)
    return Parameter(name, data)