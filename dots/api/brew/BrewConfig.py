"""Homebrew section of dots configuration."""

from pydantic import BaseModel, ConfigDict, Field


class BrewConfig(BaseModel):
    """Homebrew bundle configuration."""

    model_config = ConfigDict(extra="forbid")

    brewfile: str = Field("Brewfile", description="Bundle file, relative to dotfiles_dir unless absolute")
    install_url: str = Field(
        "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh",
        description="Homebrew installer script",
    )
    prefix: str = Field("/opt/homebrew", description="Homebrew prefix on Apple Silicon")
    shell_profile: str = Field("~/.zprofile", description="Profile that receives the brew shellenv line")
