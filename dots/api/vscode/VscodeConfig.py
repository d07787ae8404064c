"""VSCode section of dots configuration."""

from pydantic import BaseModel, ConfigDict, Field


class VscodeConfig(BaseModel):
    """VSCode settings and profile configuration.

    ``profiles`` maps a VSCode profile id (the directory name under
    ``<user_dir>/profiles``) to its settings file in the dotfiles dir.
    """

    model_config = ConfigDict(extra="forbid")

    user_dir: str = Field("~/Library/Application Support/Code/User", description="VSCode user directory")
    settings: str = Field("vscode/settings.json", description="General settings file")
    profiles: dict[str, str] = Field(
        default_factory=lambda: {
            "4a9f917b": "vscode/profiles/frontend/settings.json",
            "1a6df7f5": "vscode/profiles/node/settings.json",
        },
        description="Profile id -> settings file",
    )
    extensions_file: str = Field("vscode/extensions.txt", description="Exported extension list")
    exclude_extension_prefixes: list[str] = Field(
        default_factory=lambda: ["vscjava."],
        description="Extension id prefixes left out of the export",
    )
    code_command: str = Field("code", description="VSCode command line executable")
