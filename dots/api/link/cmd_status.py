"""Report the state of every configured home-directory link."""

from collections.abc import Iterator

from ..config.DotsConfig import DotsConfig
from ..StageResult import StageResult
from .._output_schemas.link import LinkStatusOutput
from .collect_link_specs import collect_link_specs
from .Linker import Linker
from .LinkState import LinkState


def cmd_status() -> StageResult:
    """Show whether each configured target already links to its source. Changes nothing."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = DotsConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = LinkStatusOutput(
                errors=[str(e)], warnings=[], links=[], linked=0, total=0
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.5, "Inspecting targets...")
        linker = Linker()
        links = []
        warnings = []
        for spec in collect_link_specs(config):
            state = linker.inspect(spec)
            links.append({"source": str(spec.source), "target": str(spec.target), "state": state.value})
            if not spec.source.exists():
                warnings.append(f"Source does not exist: {spec.source}")
        linked = sum(1 for entry in links if entry["state"] == LinkState.LINKED.value)

        yield (1.0, "Complete")
        result_obj.result = f"{linked} of {len(links)} link(s) in place"
        result_obj.output = LinkStatusOutput(
            errors=[], warnings=warnings, links=links, linked=linked, total=len(links)
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Checking symlinks...", progress_callback=do_work)
