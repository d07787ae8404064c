"""PackageInstaller backed by Homebrew and `brew bundle`."""

import shutil
import subprocess
from pathlib import Path

from ...utils.logger import get_logger
from ...utils.normalize_path import normalize_path
from .BrewConfig import BrewConfig
from .PackageInstaller import PackageInstaller


class BrewBundleInstaller(PackageInstaller):
    """Homebrew implementation of PackageInstaller."""

    def __init__(self, config: BrewConfig | None = None):
        self.config = config if config is not None else BrewConfig()
        self.logger = get_logger("brew")

    def _brew(self) -> str:
        brew = shutil.which("brew")
        if brew is None:
            prefixed = Path(self.config.prefix) / "bin" / "brew"
            if prefixed.exists():
                return str(prefixed)
            raise RuntimeError("Homebrew is not installed. Install it first: https://brew.sh")
        return brew

    def is_available(self) -> bool:
        return shutil.which("brew") is not None

    def bootstrap(self) -> None:
        """Run the Homebrew installer, then put brew on PATH for login shells.

        The installer is interactive, so its output is not captured.
        """
        self.logger.info("Downloading Homebrew installer from %s", self.config.install_url)
        try:
            script = subprocess.run(
                ["curl", "-fsSL", self.config.install_url],
                check=True,
                capture_output=True,
                text=True,
            ).stdout
            subprocess.run(["/bin/bash", "-c", script], check=True)
        except subprocess.CalledProcessError as e:
            raise RuntimeError(f"Homebrew installation failed: {e.stderr or e}") from e
        except FileNotFoundError as e:
            raise RuntimeError(f"Homebrew installation failed: {e}") from e

        prefix = Path(self.config.prefix)
        if prefix.is_dir():
            line = f'eval "$({prefix / "bin" / "brew"} shellenv)"'
            profile = normalize_path(self.config.shell_profile)
            existing = profile.read_text(encoding="utf-8") if profile.exists() else ""
            if line not in existing:
                with profile.open("a", encoding="utf-8") as fh:
                    fh.write(line + "\n")
                self.logger.info("Added brew shellenv to %s", profile)

    def _run(self, args: list[str]) -> None:
        self.logger.info("Running %s", " ".join(args))
        try:
            result = subprocess.run(args, check=True, capture_output=True, text=True)
        except subprocess.CalledProcessError as e:
            raise RuntimeError(f"{' '.join(args[:3])} failed: {(e.stderr or '').strip() or e}") from e
        for line in result.stdout.splitlines():
            self.logger.info("brew: %s", line)

    def install_bundle(self, bundle_file: Path) -> None:
        self._run([self._brew(), "bundle", f"--file={bundle_file}"])

    def dump_bundle(self, bundle_file: Path) -> None:
        self._run([self._brew(), "bundle", "dump", f"--file={bundle_file}", "--force"])
