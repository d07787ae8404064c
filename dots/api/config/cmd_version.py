"""Version command - package version and the state of the dotfiles checkout."""

import subprocess
from collections.abc import Iterator
from pathlib import Path

from ...utils.get_package_version import get_package_version
from ..StageResult import StageResult
from .._output_schemas.config import ConfigVersionOutput
from .DotsConfig import DotsConfig


def _git(checkout: Path, *args: str) -> str:
    result = subprocess.run(["git", *args], cwd=str(checkout), check=True, capture_output=True, text=True)
    return result.stdout


def cmd_version() -> StageResult:
    """Report the dots version and which commit of the dotfiles is checked out.

    ``dotfiles_dirty`` is set when the checkout has uncommitted changes, e.g.
    after `dots update` rewrote the Brewfile. Problems reading the checkout
    are warnings; the package version is always reported.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        warnings: list[str] = []
        dotfiles_dir = ""
        sha = ""
        dirty = False

        yield (0.2, "Getting package version...")
        version = get_package_version()

        yield (0.4, "Loading configuration...")
        try:
            dotfiles = DotsConfig.load().dotfiles_path
        except ValueError as e:
            warnings.append(str(e))
            dotfiles = None

        if dotfiles is not None:
            dotfiles_dir = str(dotfiles)
            yield (0.6, "Checking dotfiles checkout...")
            if not dotfiles.is_dir():
                warnings.append(f"Dotfiles checkout not found: {dotfiles}")
            else:
                try:
                    sha = _git(dotfiles, "rev-parse", "--short", "HEAD").strip()
                    dirty = bool(_git(dotfiles, "status", "--porcelain").strip())
                except (subprocess.CalledProcessError, OSError):
                    sha = ""
                    warnings.append(f"Dotfiles directory is not a git checkout: {dotfiles}")

        yield (1.0, "Complete")
        full_version = version
        if sha:
            full_version = f"{version} (dotfiles {sha}{'+dirty' if dirty else ''})"

        result_obj.result = f"dots version: {full_version}"
        result_obj.output = ConfigVersionOutput(
            errors=[],
            warnings=warnings,
            version=version,
            dotfiles_dir=dotfiles_dir,
            dotfiles_sha=sha,
            dotfiles_dirty=dirty,
            full_version=full_version,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Getting version information...", progress_callback=do_work)
