"""Load device configurations and read them as typed parameters."""

__version__ = "0.1.0"

__all__ = ["config", "errors", "filesys", "params", "type_conversion"]