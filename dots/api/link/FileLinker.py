"""Filesystem capability used by the Linker."""

from abc import ABC, abstractmethod
from pathlib import Path


class FileLinker(ABC):
    """Filesystem operations the Linker depends on.

    Implementations must raise ``OSError`` subclasses on failure and never
    follow a symlink at the path they are given.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """True if anything (including a dangling symlink) occupies path."""
        pass

    @abstractmethod
    def is_symlink(self, path: Path) -> bool:
        """True if path is a symbolic link."""
        pass

    @abstractmethod
    def read_link(self, path: Path) -> Path:
        """Return the text of the symbolic link at path."""
        pass

    @abstractmethod
    def rename(self, src: Path, dst: Path) -> None:
        """Move src to dst. dst is known not to exist."""
        pass

    @abstractmethod
    def remove(self, path: Path) -> None:
        """Remove a symlink, a file, or a directory tree at path."""
        pass

    @abstractmethod
    def symlink(self, source: Path, target: Path) -> None:
        """Create a symbolic link at target whose text is source."""
        pass

    @abstractmethod
    def make_dirs(self, path: Path) -> None:
        """Create path and its parents, ignoring existing directories."""
        pass
