"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    Output structure:
    - section: str - the section name, empty string if none provided (listing all sections)
    - content: dict[str, Any] - if section is empty, dict with "sections" key containing list of section names;
      if section provided, the section config
    - config_path: str - path to the configuration file
    - exists: bool - whether the configuration file exists (defaults are shown otherwise)
    """

    section: str = Field(..., description="Section name, empty string if none provided (listing all sections)")
    content: dict[str, Any] = Field(..., description="Section list or the section config")
    config_path: str = Field(..., description="Path to the configuration file")
    exists: bool = Field(..., description="Whether the configuration file exists")


class ConfigInitOutput(BaseOutputSchema):
    """Output schema for config init command."""

    config_path: str = Field(..., description="Path to the configuration file")
    written: bool = Field(..., description="Whether the file was written")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")
    dotfiles_dir: str = Field(..., description="Configured dotfiles checkout, empty string if the config is invalid")
    dotfiles_sha: str = Field(..., description="Short commit SHA of the checkout, empty string if not available")
    dotfiles_dirty: bool = Field(..., description="Whether the checkout has uncommitted changes")
    full_version: str = Field(..., description="Version plus the dotfiles commit when available")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "init", ConfigInitOutput)
register_output_schema("config", "version", ConfigVersionOutput)
