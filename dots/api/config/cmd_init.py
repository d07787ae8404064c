"""Write the default configuration file."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.config import ConfigInitOutput
from .DotsConfig import DotsConfig


def cmd_init(force: bool = False) -> StageResult:
    """Write a config file holding the defaults, so they can be edited.

    An existing file is left alone unless ``force`` is set.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = DotsConfig.get_config_path()
        yield (0.3, "Checking for existing configuration...")
        if config_path.exists() and not force:
            yield (1.0, "Complete")
            result_obj.result = f"Config already exists at {config_path} (use --force to overwrite)"
            result_obj.output = ConfigInitOutput(
                errors=[result_obj.result],
                warnings=[],
                config_path=str(config_path),
                written=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Writing configuration...")
        try:
            DotsConfig().save()
        except RuntimeError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = ConfigInitOutput(
                errors=[str(e)],
                warnings=[],
                config_path=str(config_path),
                written=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Wrote default configuration to {config_path}"
        result_obj.output = ConfigInitOutput(
            errors=[],
            warnings=[],
            config_path=str(config_path),
            written=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Initializing configuration...", progress_callback=do_work)
