"""Export installed VSCode extensions to the dotfiles repository."""

import subprocess
from collections.abc import Iterator

from ..config.DotsConfig import DotsConfig
from ..StageResult import StageResult
from .._output_schemas.vscode import VscodeExportOutput


def _list_extensions(code_command: str) -> list[str]:
    try:
        result = subprocess.run([code_command, "--list-extensions"], check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as e:
        raise RuntimeError(f"{code_command} --list-extensions failed: {(e.stderr or '').strip() or e}") from e
    except FileNotFoundError as e:
        raise RuntimeError(f"VSCode command line '{code_command}' not found") from e
    return [line.strip() for line in result.stdout.splitlines() if line.strip()]


def cmd_export() -> StageResult:
    """Write `code --list-extensions` (minus excluded prefixes) to the extensions file."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        extensions_file = ""
        yield (0.2, "Loading configuration...")
        try:
            config = DotsConfig.load()
            path = config.source_path(config.vscode.extensions_file)
            extensions_file = str(path)

            yield (0.4, "Listing VSCode extensions...")
            found = _list_extensions(config.vscode.code_command)
            prefixes = tuple(config.vscode.exclude_extension_prefixes)
            excluded = [ext for ext in found if prefixes and ext.startswith(prefixes)]
            kept = [ext for ext in found if not (prefixes and ext.startswith(prefixes))]

            yield (0.8, "Writing extensions file...")
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("".join(f"{ext}\n" for ext in kept), encoding="utf-8")
        except (ValueError, RuntimeError, OSError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error exporting VSCode extensions: {e}"
            result_obj.output = VscodeExportOutput(
                errors=[str(e)], warnings=[], extensions_file=extensions_file, extensions=[], excluded=[]
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Exported {len(kept)} extension(s) to {extensions_file}"
        result_obj.output = VscodeExportOutput(
            errors=[], warnings=[], extensions_file=extensions_file, extensions=kept, excluded=excluded
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce="Updating VSCode extensions...", progress_callback=do_work)
