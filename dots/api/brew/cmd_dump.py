"""Export installed Homebrew packages to the Brewfile."""

from collections.abc import Iterator

from ..config.DotsConfig import DotsConfig
from ..StageResult import StageResult
from .._output_schemas.brew import BrewDumpOutput
from .BrewBundleInstaller import BrewBundleInstaller
from .PackageInstaller import PackageInstaller


def cmd_dump(installer: PackageInstaller | None = None) -> StageResult:
    """Overwrite the configured Brewfile with `brew bundle dump`."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        brewfile = ""
        yield (0.2, "Loading configuration...")
        try:
            config = DotsConfig.load()
            brewfile = str(config.source_path(config.brew.brewfile))
            active = installer if installer is not None else BrewBundleInstaller(config.brew)
            yield (0.5, "Updating Brewfile...")
            active.dump_bundle(config.source_path(config.brew.brewfile))
        except (ValueError, RuntimeError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error updating Brewfile: {e}"
            result_obj.output = BrewDumpOutput(
                errors=[str(e)], warnings=[], brewfile=brewfile, written=False
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Brewfile updated: {brewfile}"
        result_obj.output = BrewDumpOutput(
            errors=[], warnings=[], brewfile=brewfile, written=True
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Updating Brewfile...", progress_callback=do_work)
