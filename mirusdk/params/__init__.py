"""Typed parameter tree: scalars, arrays, maps and their values."""

__all__ = ["composite", "errors", "parameter", "parameter_type", "scalar", "value"]