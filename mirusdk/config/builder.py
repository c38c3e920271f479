"""Step-by-step assembly of a Config."""

from __future__ import annotations

from typing import Optional

from mirusdk.config.config import Config, ConfigSource
from mirusdk.errors import MiruError
from mirusdk.filesys.file import File
from mirusdk.params.parameter import Parameter


class ConfigBuilder:
    """Collects the parts of a Config; each part may be set once."""

    def __init__(self) -> None:
        self._schema_file: Optional[File] = None
        self._config_slug: Optional[str] = None
        self._source: Optional[ConfigSource] = None
        self._data: Optional[Parameter] = None
        self._schema_digest: Optional[str] = None
        self._concrete_config_file: Optional[File] = None

    def with_schema_file(self, schema_file: File) -> "ConfigBuilder":
        if self._schema_file is not None:
            raise MiruError("Schema file already set")
        self._schema_file = schema_file
        return self

    def with_config_slug(self, config_slug: str) -> "ConfigBuilder":
        if self._config_slug is not None:
            raise MiruError("Config slug already set")
        self._config_slug = config_slug
        return self

    def with_source(self, source: ConfigSource) -> "ConfigBuilder":
        if self._source is not None:
            raise MiruError("Source already set")
        self._source = source
        return self

    def with_data(self, data: Parameter) -> "ConfigBuilder":
        if self._data is not None:
            raise MiruError("Data already set")
        self._data = data
        return self

    def with_schema_digest(self, schema_digest: str) -> "ConfigBuilder":
        if self._schema_digest is not None:
            raise MiruError("Schema digest already set")
        self._schema_digest = schema_digest
        return self

    def with_concrete_config_file(self, concrete_config_file: File) -> "ConfigBuilder":
        if self._concrete_config_file is not None:
            raise MiruError("Concrete config file already set")
        self._concrete_config_file = concrete_config_file
        return self

    def build(self) -> Config:
        """Return the Config, checking that every required part is set."""
        if self._schema_file is None:
            raise MiruError("Schema file not set")
        if self._config_slug is None:
            raise MiruError("Config slug not set")
        if self._source is None:
            raise MiruError("Source not set")
        if self._data is None:
            raise MiruError("Data not set")
        if self._source is ConfigSource.AGENT and self._schema_digest is None:
            raise MiruError(
                "Schema digest not set (must be set when retrieving the config from the agent)"
            )
        if self._source is ConfigSource.FILE_SYSTEM and self._concrete_config_file is None:
            raise MiruError(
                "Concrete config file not set (must be set when retrieving the config "
                "from the file system)"
            )
        return Config(
            schema_file=self._schema_file,
            config_slug=self._config_slug,
            source=self._source,
            root_parameter=self._data,
            schema_digest=self._schema_digest,
            config_file=self._concrete_config_file,
        )