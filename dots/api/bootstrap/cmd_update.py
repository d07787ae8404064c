"""Export the current machine's package and extension lists back into the dotfiles."""

from collections.abc import Iterator
from typing import Any

from ..brew.cmd_dump import cmd_dump as brew_dump
from ..StageResult import StageResult
from .._output_schemas.bootstrap import BootstrapUpdateOutput
from ..vscode.cmd_export import cmd_export as vscode_export
from .run_steps import Step, run_steps


def cmd_update() -> StageResult:
    """Refresh the Brewfile and the VSCode extension list. Review the result with `git diff`."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        completed: list[str] = []
        outputs: dict[str, Any] = {}
        steps: list[Step] = [("brew", brew_dump), ("vscode", vscode_export)]

        failed_step, error = yield from run_steps(steps, completed, outputs)

        yield (1.0, "Complete")
        if failed_step:
            result_obj.result = f"Update stopped at '{failed_step}': {error}"
            errors = [f"{failed_step}: {error}"]
        else:
            result_obj.result = "Done! Review changes with: git diff"
            errors = []
        result_obj.output = BootstrapUpdateOutput(
            errors=errors,
            warnings=[],
            completed=completed,
            failed_step=failed_step,
            steps=outputs,
        ).model_dump(mode="python")
        result_obj.success = not failed_step

    return StageResult(announce="Updating exported configs...", progress_callback=do_work)
