"""Output schemas for brew commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class BrewInstallOutput(BaseOutputSchema):
    """Output schema for brew install command."""

    brewfile: str = Field(..., description="Bundle file used")
    bootstrapped: bool = Field(..., description="Whether Homebrew itself was installed by this run")
    installed: bool = Field(..., description="Whether the bundle installed successfully")


class BrewDumpOutput(BaseOutputSchema):
    """Output schema for brew dump command."""

    brewfile: str = Field(..., description="Bundle file written")
    written: bool = Field(..., description="Whether the bundle file was written")


register_output_schema("brew", "install", BrewInstallOutput)
register_output_schema("brew", "dump", BrewDumpOutput)
