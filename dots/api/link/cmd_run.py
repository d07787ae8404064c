"""Link dotfiles into the home directory."""

from collections.abc import Iterator
from typing import Any

from ..config.DotsConfig import DotsConfig
from ..StageResult import StageResult
from .._output_schemas.link import LinkRunOutput
from .collect_link_specs import collect_link_specs, home_dir
from .Linker import Linker
from .link_each import link_each


def cmd_run(linker: Linker | None = None) -> StageResult:
    """Create every configured home-directory link.

    Stops at the first filesystem error; links made before it stay in place.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        links: list[dict[str, Any]] = []
        backups: list[str] = []
        warnings: list[str] = []

        def _fail(message: str) -> None:
            result_obj.result = message
            result_obj.output = LinkRunOutput(
                errors=[message], warnings=warnings, links=links, backups=backups
            ).model_dump(mode="python")
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = DotsConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            _fail(str(e))
            return

        yield (0.2, "Collecting links...")
        home_source = config.source_path(config.link.home_dir)
        if not home_source.is_dir():
            warnings.append(f"Home source directory not found: {home_source}")
        specs = collect_link_specs(config)

        active = linker if linker is not None else Linker()
        try:
            if config.link.config_dir is not None:
                active.fs.make_dirs(home_dir() / ".config")
            yield from link_each(active, specs, links, backups, start=0.3, end=1.0)
        except OSError as e:
            yield (1.0, "Complete")
            _fail(f"Linking failed: {e}")
            return

        yield (1.0, "Complete")
        result_obj.result = f"Created {len(links)} link(s), {len(backups)} backup(s)"
        result_obj.output = LinkRunOutput(
            errors=[], warnings=warnings, links=links, backups=backups
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Creating symlinks...", progress_callback=do_work)
