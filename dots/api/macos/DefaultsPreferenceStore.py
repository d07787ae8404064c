"""PreferenceStore backed by the macOS `defaults` command."""

import os
import subprocess
from pathlib import Path

from ...utils.logger import get_logger
from .DefaultsEntry import DefaultsEntry
from .PreferenceStore import PreferenceStore


def _format_value(value: bool | int | float | str) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return os.path.expanduser(value) if value.startswith("~") else value
    return str(value)


def defaults_args(entry: DefaultsEntry) -> list[str]:
    """Build the `defaults write` command line for an entry."""
    args = ["defaults"]
    if entry.current_host:
        args.append("-currentHost")
    args += ["write", entry.domain, entry.key, f"-{entry.type}"]
    if isinstance(entry.value, list):
        args += [_format_value(item) for item in entry.value]
    else:
        args.append(_format_value(entry.value))
    return args


class DefaultsPreferenceStore(PreferenceStore):
    """macOS implementation using `defaults`, `osascript`, `chflags` and `killall`."""

    def __init__(self):
        self.logger = get_logger("macos")

    def quit_app(self, app: str) -> None:
        subprocess.run(
            ["osascript", "-e", f'tell application "{app}" to quit'],
            check=False,
            capture_output=True,
            text=True,
        )

    def write(self, entry: DefaultsEntry) -> None:
        args = defaults_args(entry)
        self.logger.info("Running %s", " ".join(args))
        try:
            subprocess.run(args, check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as e:
            raise RuntimeError(f"defaults write {entry.domain} {entry.key} failed: {(e.stderr or '').strip() or e}") from e

    def unhide(self, path: Path) -> None:
        try:
            subprocess.run(["chflags", "nohidden", str(path)], check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as e:
            raise RuntimeError(f"chflags nohidden {path} failed: {(e.stderr or '').strip() or e}") from e

    def restart_app(self, app: str) -> bool:
        result = subprocess.run(["killall", app], check=False, capture_output=True, text=True)
        return result.returncode == 0
