"""Output schemas for macos commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class MacosApplyOutput(BaseOutputSchema):
    """Output schema for macos apply command."""

    written: int = Field(..., description="Number of defaults entries written")
    failed: int = Field(..., description="Number of defaults entries that failed")
    unhidden: list[str] = Field(..., description="Paths made visible")
    restarted: list[str] = Field(..., description="Applications sent a restart")


register_output_schema("macos", "apply", MacosApplyOutput)
