"""Unit test fixtures.

Environment fixtures are in tests/conftest.py. This file holds the
in-memory stand-ins for the filesystem, package manager and preference store.
"""

import subprocess
from pathlib import Path

import pytest

from dots.api.brew.PackageInstaller import PackageInstaller
from dots.api.link.FileLinker import FileLinker
from dots.api.link.Linker import Linker
from dots.api.macos.DefaultsEntry import DefaultsEntry
from dots.api.macos.PreferenceStore import PreferenceStore
from dots.api.StageResult import StageResult
from tests.conftest import run_cmd

__all__ = [
    "FakeInstaller",
    "FakeStore",
    "MemoryFileLinker",
    "completed",
    "make_stage",
    "run_cmd",
]


class MemoryFileLinker(FileLinker):
    """FileLinker over a dict of path -> entry, recording every mutation.

    Entries are ("file", content), ("dir", None) or ("link", source).
    ``fail_on`` holds (operation, path) pairs that raise PermissionError.
    """

    def __init__(self, entries: dict | None = None, fail_on: set | None = None):
        self.entries: dict[Path, tuple] = dict(entries or {})
        self.fail_on = fail_on or set()
        self.ops: list[tuple] = []

    def _check(self, op: str, path: Path) -> None:
        if (op, path) in self.fail_on:
            raise PermissionError(13, "Permission denied", str(path))

    def exists(self, path: Path) -> bool:
        return path in self.entries

    def is_symlink(self, path: Path) -> bool:
        return self.entries.get(path, ("",))[0] == "link"

    def read_link(self, path: Path) -> Path:
        return self.entries[path][1]

    def rename(self, src: Path, dst: Path) -> None:
        self._check("rename", src)
        self.entries[dst] = self.entries.pop(src)
        self.ops.append(("rename", src, dst))

    def remove(self, path: Path) -> None:
        self._check("remove", path)
        del self.entries[path]
        self.ops.append(("remove", path))

    def symlink(self, source: Path, target: Path) -> None:
        self._check("symlink", target)
        self.entries[target] = ("link", source)
        self.ops.append(("symlink", source, target))

    def make_dirs(self, path: Path) -> None:
        self._check("make_dirs", path)
        self.entries.setdefault(path, ("dir", None))
        self.ops.append(("make_dirs", path))


class FakeInstaller(PackageInstaller):
    def __init__(self, available: bool = True, fail: str = ""):
        self.available = available
        self.fail = fail
        self.calls: list[tuple] = []

    def is_available(self) -> bool:
        return self.available

    def bootstrap(self) -> None:
        self.calls.append(("bootstrap",))
        if self.fail == "bootstrap":
            raise RuntimeError("installer download failed")
        self.available = True

    def install_bundle(self, bundle_file: Path) -> None:
        self.calls.append(("install", bundle_file))
        if self.fail == "install":
            raise RuntimeError("brew bundle failed: formula not found")

    def dump_bundle(self, bundle_file: Path) -> None:
        self.calls.append(("dump", bundle_file))
        if self.fail == "dump":
            raise RuntimeError("brew bundle dump failed")


class FakeStore(PreferenceStore):
    def __init__(self, fail_keys: set | None = None):
        self.fail_keys = fail_keys or set()
        self.quit: list[str] = []
        self.written: list[DefaultsEntry] = []
        self.unhidden: list[Path] = []
        self.restarted: list[str] = []

    def quit_app(self, app: str) -> None:
        self.quit.append(app)

    def write(self, entry: DefaultsEntry) -> None:
        if entry.key in self.fail_keys:
            raise RuntimeError(f"defaults write {entry.domain} {entry.key} failed: denied")
        self.written.append(entry)

    def unhide(self, path: Path) -> None:
        self.unhidden.append(path)

    def restart_app(self, app: str) -> bool:
        self.restarted.append(app)
        return app != "Safari"


def make_stage(name: str, calls: list[str], success: bool = True):
    """Factory for a step that records its invocation and succeeds or fails."""

    def factory(*args, **kwargs) -> StageResult:
        def do_work(result_obj: StageResult):
            calls.append(name)
            yield (0.5, f"{name} working")
            yield (1.0, "Complete")
            result_obj.result = f"{name} done" if success else f"{name} broke"
            result_obj.output = {"errors": [] if success else [f"{name} broke"], "warnings": []}
            result_obj.success = success

        return StageResult(announce=f"Running {name}...", progress_callback=do_work)

    return factory


def completed(args: list[str], stdout: str = "", returncode: int = 0) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr="")


@pytest.fixture
def memory_linker() -> MemoryFileLinker:
    return MemoryFileLinker()


@pytest.fixture
def linker() -> Linker:
    """Linker over the real filesystem (tests run inside tmp_path)."""
    return Linker()
