"""List configured applications."""

from collections.abc import Iterator

from ..config.DotsConfig import DotsConfig
from ..StageResult import StageResult
from .._output_schemas.app import AppListOutput


def cmd_list() -> StageResult:
    """List the applications from the ``apps`` config section."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Loading configuration...")
        try:
            config = DotsConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = AppListOutput(errors=[str(e)], warnings=[], apps={}).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        apps = {name: app.model_dump(mode="json") for name, app in config.apps.items()}
        result_obj.result = f"Found {len(apps)} app(s)"
        result_obj.output = AppListOutput(errors=[], warnings=[], apps=apps).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Listing apps...", progress_callback=do_work)
