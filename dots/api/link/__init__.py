"""Link domain - idempotent symlink-with-backup of dotfiles."""

from .FileLinker import FileLinker
from .Linker import Linker
from .LinkSpec import LinkSpec
from .LinkState import LinkState
from .LocalFileLinker import LocalFileLinker

__all__ = ["FileLinker", "LinkSpec", "LinkState", "Linker", "LocalFileLinker"]
