"""Link section of dots configuration."""

from pydantic import BaseModel, ConfigDict, Field


class LinkEntry(BaseModel):
    """An explicit link: source relative to the dotfiles dir (or absolute), target under home."""

    model_config = ConfigDict(extra="forbid")

    source: str = Field(..., description="Source path, relative to dotfiles_dir unless absolute")
    target: str = Field(..., description="Target path (~ is expanded)")


class LinkConfig(BaseModel):
    """Which dotfiles get linked into the home directory."""

    model_config = ConfigDict(extra="forbid")

    home_dir: str = Field("home", description="Directory whose dot-entries are linked into ~")
    config_dir: str | None = Field(
        None,
        description="Directory whose subdirectories are linked into ~/.config (disabled when null)",
    )
    extra: list[LinkEntry] = Field(default_factory=list, description="Additional explicit links")
