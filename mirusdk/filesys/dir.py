"""Directories on the file system."""

from __future__ import annotations

from pathlib import Path

from mirusdk.filesys.errors import (
    DirNotFoundError,
    NotADirError,
    UnableToFindGitRepoError,
)
from mirusdk.filesys.file import File
from mirusdk.filesys.path import FsPath, PathLike


class Dir(FsPath):
    """A directory, kept as the path it was given."""

    __slots__ = ()

    @staticmethod
    def from_current_dir() -> "Dir":
        """The current working directory."""
        return Dir(Path.cwd())

    def assert_exists(self) -> None:
        """Raise unless the path exists and is a directory."""
        if not self.path.exists():
            raise DirNotFoundError(str(self.path), str(self.abs_path()))
        if not self.path.is_dir():
            raise NotADirError(str(self.path))

    def exists(self) -> bool:
        return self.path.is_dir()

    def parent(self) -> "Dir":
        """The enclosing directory; the root is its own parent."""
        return Dir(self.abs_path().parent)

    def subdir(self, path: PathLike) -> "Dir":
        return Dir(self.path / path)

    def file(self, path: PathLike) -> File:
        return File(self.path / path)

    def git_root(self) -> "Dir":
        """The nearest enclosing directory that holds a ``.git`` directory."""
        self.assert_exists()
        current = Dir(self.abs_path())
        while not current.subdir(".git").exists():
            parent = current.parent()
            if parent.path == current.path:
                raise UnableToFindGitRepoError(str(self.path))
            current = parent
        return current