"""Output schemas for vscode commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class VscodeSetupOutput(BaseOutputSchema):
    """Output schema for vscode setup command."""

    user_dir: str = Field(..., description="VSCode user settings directory")
    links: list[dict[str, Any]] = Field(..., description="Settings links created")
    backups: list[str] = Field(..., description="Backup paths written for replaced settings files")
    skipped_profiles: list[str] = Field(..., description="Profile ids skipped because their source is missing")


class VscodeExportOutput(BaseOutputSchema):
    """Output schema for vscode export command."""

    extensions_file: str = Field(..., description="File the extension list was written to")
    extensions: list[str] = Field(..., description="Extension ids written")
    excluded: list[str] = Field(..., description="Extension ids filtered out")


register_output_schema("vscode", "setup", VscodeSetupOutput)
register_output_schema("vscode", "export", VscodeExportOutput)
