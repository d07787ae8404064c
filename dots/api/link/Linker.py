"""Make a target path a symbolic link to its source, keeping one backup."""

from collections.abc import Iterable

from ...utils.logger import get_logger
from .FileLinker import FileLinker
from .LinkSpec import LinkSpec
from .LinkState import LinkState
from .LocalFileLinker import LocalFileLinker


class Linker:
    """Idempotent symlink-with-backup over a FileLinker.

    After ``ensure_link`` returns, ``spec.target`` is a symlink whose text is
    ``spec.source``. A non-symlink entry found at the target is renamed to
    ``spec.backup`` (replacing any earlier backup); an existing symlink is
    removed without a backup. Filesystem errors propagate unchanged.
    """

    def __init__(self, file_linker: FileLinker | None = None):
        self.fs = file_linker if file_linker is not None else LocalFileLinker()
        self.logger = get_logger("link")

    def inspect(self, spec: LinkSpec) -> LinkState:
        """Report the current state of ``spec.target`` without touching it."""
        if not self.fs.exists(spec.target):
            return LinkState.ABSENT
        if not self.fs.is_symlink(spec.target):
            return LinkState.FILE
        if self.fs.read_link(spec.target) == spec.source:
            return LinkState.LINKED
        return LinkState.SYMLINK

    def ensure_link(self, spec: LinkSpec) -> None:
        """Make ``spec.target`` a symlink to ``spec.source``.

        The source is not checked. A failure after the old symlink is removed
        leaves the target absent.
        """
        target = spec.target

        if self.fs.exists(target) and not self.fs.is_symlink(target):
            backup = spec.backup
            if self.fs.exists(backup):
                self.fs.remove(backup)
            self.logger.info("Backing up %s to %s", target, backup)
            self.fs.rename(target, backup)

        if self.fs.is_symlink(target):
            self.logger.debug("Removing existing symlink %s", target)
            self.fs.remove(target)

        self.fs.symlink(spec.source, target)
        self.logger.info("Linked %s -> %s", target, spec.source)

    def ensure_links(self, specs: Iterable[LinkSpec]) -> None:
        """Apply ``ensure_link`` to each spec in order, stopping at the first error."""
        for spec in specs:
            self.ensure_link(spec)
