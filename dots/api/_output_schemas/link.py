"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkRunOutput(BaseOutputSchema):
    """Output schema for link run command.

    Each entry of ``links`` has ``source``, ``target`` and ``previous``
    (the state of the target before linking: absent, file, linked or symlink).
    """

    links: list[dict[str, Any]] = Field(..., description="Links created, in order")
    backups: list[str] = Field(..., description="Backup paths written")


class LinkStatusOutput(BaseOutputSchema):
    """Output schema for link status command."""

    links: list[dict[str, Any]] = Field(..., description="Each configured link with its current state")
    linked: int = Field(..., description="Number of targets already linked to their source")
    total: int = Field(..., description="Number of configured links")


register_output_schema("link", "run", LinkRunOutput)
register_output_schema("link", "status", LinkStatusOutput)
