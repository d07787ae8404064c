"""Output schemas for zsh commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ZshSetupOutput(BaseOutputSchema):
    """Output schema for zsh setup command."""

    oh_my_zsh_dir: str = Field(..., description="Oh My Zsh installation directory")
    oh_my_zsh_installed: bool = Field(..., description="Whether Oh My Zsh was installed by this run")
    plugins_cloned: list[str] = Field(..., description="Plugins cloned by this run")
    plugins_present: list[str] = Field(..., description="Plugins that were already present")


register_output_schema("zsh", "setup", ZshSetupOutput)
