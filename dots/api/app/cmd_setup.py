"""Link an application's settings files and directories."""

from collections.abc import Iterator
from typing import Any

from ...utils.normalize_path import normalize_path
from ..config.DotsConfig import DotsConfig
from ..link.Linker import Linker
from ..link.LinkSpec import LinkSpec
from ..link.link_each import link_each
from ..StageResult import StageResult
from .._output_schemas.app import AppSetupOutput


def cmd_setup(name: str, linker: Linker | None = None) -> StageResult:
    """Create the parent directories of each target, then link every configured pair.

    Args:
        name: Application name, a key of the ``apps`` config section
        linker: Linker to use (defaults to the local filesystem)
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        links: list[dict[str, Any]] = []
        backups: list[str] = []

        def _fail(message: str) -> None:
            result_obj.result = message
            result_obj.output = AppSetupOutput(
                errors=[message], warnings=[], app=name, links=links, backups=backups
            ).model_dump(mode="python")
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = DotsConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            _fail(str(e))
            return

        app = config.apps.get(name)
        if app is None:
            yield (1.0, "Complete")
            _fail(f"Unknown app: {name!r} (configured: {sorted(config.apps)})")
            return

        specs = [
            LinkSpec(source=config.source_path(source), target=normalize_path(target))
            for target, source in app.links.items()
        ]
        active = linker if linker is not None else Linker()
        try:
            yield (0.2, "Creating directories...")
            for parent in dict.fromkeys(spec.target.parent for spec in specs):
                active.fs.make_dirs(parent)
            yield from link_each(active, specs, links, backups, start=0.3, end=1.0)
        except OSError as e:
            yield (1.0, "Complete")
            _fail(f"{name} setup failed: {e}")
            return

        yield (1.0, "Complete")
        result_obj.result = f"{name} setup complete ({len(links)} link(s))"
        result_obj.output = AppSetupOutput(
            errors=[], warnings=[], app=name, links=links, backups=backups
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Setting up {name}...", progress_callback=do_work)
