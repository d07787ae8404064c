"""Install Oh My Zsh and clone zsh plugins."""

import os
import subprocess
from collections.abc import Iterator
from pathlib import Path

from ...utils.logger import get_logger
from ...utils.normalize_path import normalize_path
from ..config.DotsConfig import DotsConfig
from ..StageResult import StageResult
from .._output_schemas.zsh import ZshSetupOutput
from .ZshConfig import ZshConfig


def _custom_dir(oh_my_zsh_dir: Path) -> Path:
    """$ZSH_CUSTOM, or the custom dir inside the Oh My Zsh checkout."""
    custom = os.environ.get("ZSH_CUSTOM")
    return normalize_path(custom) if custom else oh_my_zsh_dir / "custom"


def _install_oh_my_zsh(config: ZshConfig) -> None:
    """Run the Oh My Zsh installer unattended, so it does not switch the login shell.

    The installer still writes its own ~/.zshrc. `dots install` runs the link
    step after this one, which backs that file up and restores the link.
    """
    try:
        script = subprocess.run(
            ["curl", "-fsSL", config.install_url],
            check=True,
            capture_output=True,
            text=True,
        ).stdout
        subprocess.run(["sh", "-c", script, "", "--unattended"], check=True)
    except subprocess.CalledProcessError as e:
        raise RuntimeError(f"Oh My Zsh installation failed: {e.stderr or e}") from e
    except FileNotFoundError as e:
        raise RuntimeError(f"Oh My Zsh installation failed: {e}") from e


def _clone(url: str, dest: Path) -> None:
    try:
        subprocess.run(["git", "clone", url, str(dest)], check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as e:
        raise RuntimeError(f"git clone {url} failed: {(e.stderr or '').strip() or e}") from e
    except FileNotFoundError as e:
        raise RuntimeError(f"git clone {url} failed: {e}") from e


def cmd_setup() -> StageResult:
    """Install Oh My Zsh if missing, then clone each missing plugin."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        logger = get_logger("zsh")
        oh_my_zsh_dir = ""
        installed = False
        cloned: list[str] = []
        present: list[str] = []

        def _fail(message: str) -> None:
            result_obj.result = message
            result_obj.output = ZshSetupOutput(
                errors=[message],
                warnings=[],
                oh_my_zsh_dir=oh_my_zsh_dir,
                oh_my_zsh_installed=installed,
                plugins_cloned=cloned,
                plugins_present=present,
            ).model_dump(mode="python")
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = DotsConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            _fail(str(e))
            return

        omz = normalize_path(config.zsh.oh_my_zsh_dir)
        oh_my_zsh_dir = str(omz)

        try:
            if not omz.is_dir():
                yield (0.2, "Installing Oh My Zsh...")
                _install_oh_my_zsh(config.zsh)
                installed = True
                logger.info("Installed Oh My Zsh into %s", omz)

            plugins_dir = _custom_dir(omz) / "plugins"
            total = max(len(config.zsh.plugins), 1)
            for index, (name, url) in enumerate(config.zsh.plugins.items()):
                dest = plugins_dir / name
                if dest.is_dir():
                    present.append(name)
                    continue
                yield (0.5 + 0.5 * index / total, f"Cloning {name}...")
                _clone(url, dest)
                cloned.append(name)
                logger.info("Cloned %s into %s", url, dest)
        except RuntimeError as e:
            yield (1.0, "Complete")
            _fail(str(e))
            return

        yield (1.0, "Complete")
        result_obj.result = f"Zsh ready ({len(cloned)} plugin(s) cloned)"
        result_obj.output = ZshSetupOutput(
            errors=[],
            warnings=[],
            oh_my_zsh_dir=oh_my_zsh_dir,
            oh_my_zsh_installed=installed,
            plugins_cloned=cloned,
            plugins_present=present,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Installing Zsh plugins...", progress_callback=do_work)
