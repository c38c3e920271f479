# mirusdk

Load device configurations from the file system or through a client for the
on-device agent, and read their values as typed parameters.

A configuration is described by a schema file (JSON or YAML) that names its
config slug under the `$miru_config_slug` field, and by a concrete config
holding the values. The values are exposed as a tree of `Parameter` objects:
primitives, arrays, nested arrays, maps and arrays of maps.

## Installation

```
pip install mirusdk
```

To run the test suite:

```
pip install "mirusdk[test]"
pytest
```

## Loading a configuration from files

```python
from mirusdk.config.config import Config, ConfigSource

config = Config.from_file("config/schema.yaml", "config/values.yaml")
config.config_slug        # the schema's "$miru_config_slug"
config.source             # ConfigSource.FILE_SYSTEM
root = config.root_parameter
```

The root parameter is named after the config slug; its children are named
`<slug>.<key>`, `<slug>.<key>.<index>` and so on. A mapping becomes a `Map`,
a list of mappings a `MapArray`, a list of lists a `NestedArray`, and a list
of primitives a bool, integer, double or string array (falling back to a
scalar array when the element types are mixed).

```python
port = root.as_map()["port"]       # Map lookup by the last name segment
port.name                          # "<slug>.port"
port.as_int()
root.as_map()["hosts"].as_string_array()
```

`read_schema_config_slug(File(...))` in `mirusdk.config.config` returns the
slug on its own. A schema without a slug raises
`mirusdk.config.errors.ConfigSlugNotFound`; an empty slug raises
`mirusdk.config.errors.EmptyConfigSlug`.

## Loading a configuration through the agent

`Config.from_agent(schema_file_path, client, options=None)` takes a client
object with three methods:

- `hash_schema(schema_format, schema_base64)` receives the schema's
  `FileType` and its base64-encoded contents and returns the schema digest;
- `refresh_latest_concrete_config(schema_digest, config_slug)` returns the
  concrete config data (a dict as parsed from JSON);
- `get_latest_concrete_config(schema_digest, config_slug)` is called when the
  refresh raises, and returns the cached data.

If the data returned is `None`, `EmptyConcreteConfig` is raised.

`FromAgentOptions` controls the attempts: `num_retries` (default 3; less than
1 raises `FromAgentOptionsError`), `retry_delay` in seconds (default 0.5) and
`default_config_path`, a concrete config file loaded with `from_file` when
every attempt fails. If that fallback fails too, the last error from the
agent is raised.

## Building a configuration by hand

`ConfigBuilder` in `mirusdk.config.builder` collects the parts of a `Config`
(`with_schema_file`, `with_config_slug`, `with_source`, `with_data`,
`with_schema_digest`, `with_concrete_config_file`). Each part may be set only
once, and `build()` raises `MiruError` unless the schema file, slug, source and
data are set, plus the schema digest for `ConfigSource.AGENT` or the concrete
config file for `ConfigSource.FILE_SYSTEM`.

## Parameters and values

```python
from mirusdk.params.parameter import Parameter
from mirusdk.params.parameter_type import ParameterType
from mirusdk.type_conversion import IntKind

p = Parameter("robot.speed", 42)
p.type                          # ParameterType.INTEGER
p.key, p.parent_name            # ("speed", "robot")
p.as_int()                      # 42
p.get_value(IntKind.UINT8)      # 42, range-checked
p.get_value(list[float])        # raises InvalidParameterTypeError
```

Reading a parameter as the wrong type raises
`mirusdk.params.errors.InvalidParameterTypeError`, whose message names the
parameter. `ParameterValue` in `mirusdk.params.value` holds the typed value on
its own; `Map`, `MapArray` and `NestedArray` live in
`mirusdk.params.composite`.

## Scalars

Scalars keep their source text and are converted when read:

```python
from mirusdk.params.scalar import Scalar, scalar_array_as

Scalar("42").as_int()        # 42
Scalar("3.5").as_double()    # 3.5
Scalar("yes").as_bool()      # True ("y", "on", "true" are accepted too)
Scalar("hello").as_string()  # "hello"

scalar_array_as([Scalar("1"), Scalar("2")], int)  # [1, 2]
```

A value that cannot be converted raises
`mirusdk.params.errors.InvalidScalarConversionError`.

## String conversion helpers

```python
from mirusdk.type_conversion import (
    FloatKind, IntKind, string_as, string_to_double, string_to_int64, yaml_string_to_bool,
)

string_to_int64("-17")              # -17
string_to_double("1e3")             # 1000.0
yaml_string_to_bool("OFF")          # False
string_as("300", IntKind.UINT8)     # raises: outside the uint8 range
string_as("1.5", FloatKind.FLOAT32) # 1.5
```

Invalid input raises `mirusdk.type_conversion.InvalidTypeConversionError`.
Every error in the package derives from `mirusdk.errors.MiruError`.

## Files and directories

```python
from mirusdk.filesys.dir import Dir
from mirusdk.filesys.file import File, FileType

schema = File("config/schema.yaml")
schema.file_type()               # FileType.YAML (.json, .yaml and .yml are known)
data = schema.read_structured_data()

Dir.from_current_dir().git_root()  # nearest directory holding .git
```

Missing files raise `FileNotFoundInPathError`, unsupported extensions
`InvalidFileTypeError`, missing directories `DirNotFoundError` (all in
`mirusdk.filesys.errors`).

## What the package does not do

- It has no connection to the agent of its own: `Config.from_agent` needs a
  client object supplied by the caller.
- It has no search or query functions over the parameter tree; walk it with
  `Map`, `MapArray` and `NestedArray` lookups and iteration.
- It does not validate concrete configs against their schema.
- It has no command-line tool.