"""Config loading from files or through an agent client, and config building."""

__all__ = ["builder", "config", "errors"]