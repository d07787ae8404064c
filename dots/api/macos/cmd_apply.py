"""Apply macOS system preferences."""

import platform
from collections.abc import Iterator

from ...utils.logger import get_logger
from ...utils.normalize_path import normalize_path
from ..config.DotsConfig import DotsConfig
from ..StageResult import StageResult
from .._output_schemas.macos import MacosApplyOutput
from .DefaultsPreferenceStore import DefaultsPreferenceStore
from .PreferenceStore import PreferenceStore


def cmd_apply(store: PreferenceStore | None = None) -> StageResult:
    """Write every configured defaults entry, unhide paths, restart affected apps.

    Unlike the linking commands this keeps going after a failed entry and
    reports all failures at the end. Some settings only take effect after a
    logout or restart.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        logger = get_logger("macos")
        errors: list[str] = []
        unhidden: list[str] = []
        restarted: list[str] = []
        written = 0

        def _finish(result: str) -> None:
            result_obj.result = result
            result_obj.output = MacosApplyOutput(
                errors=errors,
                warnings=["Some changes require a logout/restart to take effect."] if written else [],
                written=written,
                failed=len(errors),
                unhidden=unhidden,
                restarted=restarted,
            ).model_dump(mode="python")
            result_obj.success = not errors

        yield (0.05, "Checking platform...")
        system = platform.system().lower()
        if system != "darwin":
            errors.append(f"macOS preferences can only be applied on darwin (running on {system})")
            yield (1.0, "Complete")
            _finish("Unsupported operating system")
            return

        yield (0.1, "Loading configuration...")
        try:
            config = DotsConfig.load()
        except ValueError as e:
            errors.append(str(e))
            yield (1.0, "Complete")
            _finish(str(e))
            return

        active = store if store is not None else DefaultsPreferenceStore()
        macos = config.macos

        for app in macos.quit_apps:
            active.quit_app(app)

        total = max(len(macos.defaults), 1)
        for index, entry in enumerate(macos.defaults):
            yield (0.1 + 0.7 * index / total, f"Writing {entry.domain} {entry.key}...")
            try:
                active.write(entry)
                written += 1
            except RuntimeError as e:
                logger.error(str(e))
                errors.append(str(e))

        yield (0.85, "Unhiding folders...")
        for raw in macos.unhide_paths:
            path = normalize_path(raw)
            try:
                active.unhide(path)
                unhidden.append(str(path))
            except RuntimeError as e:
                logger.error(str(e))
                errors.append(str(e))

        yield (0.9, "Restarting affected applications...")
        for app in macos.restart_apps:
            if active.restart_app(app):
                restarted.append(app)

        yield (1.0, "Complete")
        if errors:
            _finish(f"Applied {written} setting(s), {len(errors)} failure(s)")
        else:
            _finish(f"Applied {written} setting(s)")

    return StageResult(announce="Configuring macOS defaults...", progress_callback=do_work)
