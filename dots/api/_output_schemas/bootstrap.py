"""Output schemas for bootstrap commands (install / update)."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class BootstrapInstallOutput(BaseOutputSchema):
    """Output schema for the full install sequence."""

    completed: list[str] = Field(..., description="Steps that finished successfully, in order")
    failed_step: str = Field(..., description="Step that stopped the sequence, empty string if none")
    steps: dict[str, Any] = Field(..., description="Output of each step that ran, keyed by step name")
    next_steps: list[str] = Field(..., description="Manual follow-ups for the user")


class BootstrapUpdateOutput(BaseOutputSchema):
    """Output schema for the update (export) sequence."""

    completed: list[str] = Field(..., description="Steps that finished successfully, in order")
    failed_step: str = Field(..., description="Step that stopped the sequence, empty string if none")
    steps: dict[str, Any] = Field(..., description="Output of each step that ran, keyed by step name")


register_output_schema("bootstrap", "install", BootstrapInstallOutput)
register_output_schema("bootstrap", "update", BootstrapUpdateOutput)
