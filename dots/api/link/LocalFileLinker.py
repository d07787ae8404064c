"""FileLinker backed by the local filesystem."""

import os
import shutil
from pathlib import Path

from .FileLinker import FileLinker


class LocalFileLinker(FileLinker):
    """Local filesystem implementation of FileLinker."""

    def exists(self, path: Path) -> bool:
        return os.path.lexists(path)

    def is_symlink(self, path: Path) -> bool:
        return Path(path).is_symlink()

    def read_link(self, path: Path) -> Path:
        return Path(os.readlink(path))

    def rename(self, src: Path, dst: Path) -> None:
        os.rename(src, dst)

    def remove(self, path: Path) -> None:
        path = Path(path)
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()

    def symlink(self, source: Path, target: Path) -> None:
        os.symlink(source, target)

    def make_dirs(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)
