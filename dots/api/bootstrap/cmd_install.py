"""Full environment installation."""

from collections.abc import Iterator
from functools import partial
from typing import Any

from ..app.cmd_setup import cmd_setup as app_setup
from ..brew.cmd_install import cmd_install as brew_install
from ..config.DotsConfig import DotsConfig
from ..link.cmd_run import cmd_run as link_run
from ..macos.cmd_apply import cmd_apply as macos_apply
from ..StageResult import StageResult
from .._output_schemas.bootstrap import BootstrapInstallOutput
from ..vscode.cmd_setup import cmd_setup as vscode_setup
from ..zsh.cmd_setup import cmd_setup as zsh_setup
from .run_steps import Step, run_steps

NEXT_STEPS = [
    "Restart your terminal (or run: source ~/.zshrc)",
    "Run 'fnm install --lts' to install Node.js",
    "Run 'pnpm create vue@latest' to create a Vue project",
    "Open VSCode and sign in to sync settings",
]


def _steps(config: DotsConfig, macos: bool) -> list[Step]:
    steps: list[Step] = [
        ("brew", partial(brew_install, bootstrap=True)),
        ("zsh", zsh_setup),
        ("link", link_run),
        ("vscode", vscode_setup),
    ]
    for name, app in config.apps.items():
        if app.auto_install:
            steps.append((f"app:{name}", partial(app_setup, name)))
    if macos:
        steps.append(("macos", macos_apply))
    return steps


def cmd_install(macos: bool = False) -> StageResult:
    """Install packages, shell plugins, links, editor and app settings, then optionally macOS preferences.

    The first failing step stops the sequence.

    Args:
        macos: Also apply macOS system preferences
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        completed: list[str] = []
        outputs: dict[str, Any] = {}

        yield (0.0, "Loading configuration...")
        try:
            config = DotsConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = BootstrapInstallOutput(
                errors=[str(e)], warnings=[], completed=[], failed_step="config", steps={}, next_steps=[]
            ).model_dump(mode="python")
            result_obj.success = False
            return

        failed_step, error = yield from run_steps(_steps(config, macos), completed, outputs)

        yield (1.0, "Complete")
        if failed_step:
            result_obj.result = f"Installation stopped at '{failed_step}': {error}"
            result_obj.output = BootstrapInstallOutput(
                errors=[f"{failed_step}: {error}"],
                warnings=[],
                completed=completed,
                failed_step=failed_step,
                steps=outputs,
                next_steps=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        result_obj.result = "Installation complete!"
        result_obj.output = BootstrapInstallOutput(
            errors=[],
            warnings=[],
            completed=completed,
            failed_step="",
            steps=outputs,
            next_steps=NEXT_STEPS,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Dotfiles installation", progress_callback=do_work)
