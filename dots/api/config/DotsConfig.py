"""Top-level dots configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import CONFIG_FILENAME
from ...utils.normalize_path import normalize_path
from ..app.AppConfig import AppConfig, default_apps
from ..brew.BrewConfig import BrewConfig
from ..link.LinkConfig import LinkConfig
from ..macos.MacosConfig import MacosConfig
from ..vscode.VscodeConfig import VscodeConfig
from ..zsh.ZshConfig import ZshConfig
from .get_home_dir import get_home_dir


class DotsConfig(BaseModel):
    """Top-level configuration for all dots domains.

    Every section has defaults, so an empty document (or no file at all)
    describes the stock setup.
    """

    model_config = ConfigDict(extra="forbid")

    dotfiles_dir: str = Field("~/dotfiles", description="Checkout of the dotfiles repository")
    link: LinkConfig = Field(default_factory=LinkConfig)
    brew: BrewConfig = Field(default_factory=BrewConfig)
    zsh: ZshConfig = Field(default_factory=ZshConfig)
    vscode: VscodeConfig = Field(default_factory=VscodeConfig)
    apps: dict[str, AppConfig] = Field(default_factory=default_apps)
    macos: MacosConfig = Field(default_factory=MacosConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on DOTS_HOME or default to ~/.dots."""
        return get_home_dir(CONFIG_FILENAME)

    @classmethod
    def load(cls) -> "DotsConfig":
        """Load and validate config from file.

        A missing file yields the default configuration.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    @property
    def dotfiles_path(self) -> Path:
        return normalize_path(self.dotfiles_dir)

    def source_path(self, relative: str) -> Path:
        """Resolve a source path: absolute (or ~) paths as-is, others under the dotfiles dir."""
        path = Path(relative).expanduser()
        if path.is_absolute():
            return path
        return self.dotfiles_path / path

    def to_dict(self) -> dict[str, Any]:
        """Convert DotsConfig instance to a dictionary for serialization."""
        return self.model_dump(mode="json")

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
