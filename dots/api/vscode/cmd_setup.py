"""Link VSCode settings and profile settings."""

from collections.abc import Iterator
from typing import Any

from ...utils.logger import get_logger
from ...utils.normalize_path import normalize_path
from ..config.DotsConfig import DotsConfig
from ..link.Linker import Linker
from ..link.LinkSpec import LinkSpec
from ..link.link_each import link_each
from ..StageResult import StageResult
from .._output_schemas.vscode import VscodeSetupOutput


def cmd_setup(linker: Linker | None = None) -> StageResult:
    """Link the general settings.json and each configured profile's settings.json.

    A profile whose source file is missing is skipped with a warning; any
    filesystem error stops the command.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        logger = get_logger("vscode")
        user_dir = ""
        links: list[dict[str, Any]] = []
        backups: list[str] = []
        warnings: list[str] = []
        skipped: list[str] = []

        def _output(errors: list[str]) -> dict[str, Any]:
            return VscodeSetupOutput(
                errors=errors,
                warnings=warnings,
                user_dir=user_dir,
                links=links,
                backups=backups,
                skipped_profiles=skipped,
            ).model_dump(mode="python")

        yield (0.1, "Loading configuration...")
        try:
            config = DotsConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = _output([str(e)])
            result_obj.success = False
            return

        vscode = config.vscode
        user_path = normalize_path(vscode.user_dir)
        user_dir = str(user_path)
        active = linker if linker is not None else Linker()

        specs = [LinkSpec(source=config.source_path(vscode.settings), target=user_path / "settings.json")]
        profile_dirs = []
        for profile_id, settings_file in vscode.profiles.items():
            source = config.source_path(settings_file)
            if not source.is_file():
                message = f"Source file {source} not found for profile {profile_id}; skipping"
                logger.warning(message)
                warnings.append(message)
                skipped.append(profile_id)
                continue
            profile_dir = user_path / "profiles" / profile_id
            profile_dirs.append(profile_dir)
            specs.append(LinkSpec(source=source, target=profile_dir / "settings.json"))

        try:
            yield (0.2, "Creating VSCode user directory...")
            active.fs.make_dirs(user_path)
            for profile_dir in profile_dirs:
                active.fs.make_dirs(profile_dir)
            yield from link_each(active, specs, links, backups, start=0.3, end=1.0)
        except OSError as e:
            yield (1.0, "Complete")
            result_obj.result = f"VSCode setup failed: {e}"
            result_obj.output = _output([str(e)])
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"VSCode setup complete ({len(links)} link(s))"
        result_obj.output = _output([])
        result_obj.success = True

    return StageResult(announce="Setting up VSCode...", progress_callback=do_work)
