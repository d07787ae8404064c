"""Run a sequence of commands, stopping at the first failure."""

from collections.abc import Callable, Generator
from typing import Any

from ...utils.logger import get_logger
from ..StageResult import StageResult

Step = tuple[str, Callable[[], StageResult]]


def run_steps(
    steps: list[Step],
    completed: list[str],
    outputs: dict[str, Any],
) -> Generator[tuple[float, str], None, tuple[str, str]]:
    """Drive each step's progress callback in order.

    Step progress is rescaled into the overall sequence. ``completed`` and
    ``outputs`` are filled as steps finish. Returns (via ``yield from``) the
    name of the failed step with its error message, or ``("", "")``.
    """
    logger = get_logger("bootstrap")
    total = max(len(steps), 1)
    for index, (name, factory) in enumerate(steps):
        stage = factory()
        yield (index / total, f"[{name}] {stage.announce}")
        for fraction, message in stage.progress_callback(stage):
            yield ((index + fraction) / total, f"[{name}] {message}")
        outputs[name] = stage.output
        if not stage.success:
            errors = stage.output.get("errors") or [stage.result]
            logger.error("Step %s failed: %s", name, errors[0])
            return name, errors[0]
        logger.info("Step %s complete: %s", name, stage.result)
        completed.append(name)
    return "", ""
