"""File and directory helpers for reading schema and config files."""

__all__ = ["dir", "errors", "file", "path"]