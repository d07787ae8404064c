"""Output schemas for app commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class AppSetupOutput(BaseOutputSchema):
    """Output schema for app setup command."""

    app: str = Field(..., description="Application name")
    links: list[dict[str, Any]] = Field(..., description="Links created")
    backups: list[str] = Field(..., description="Backup paths written")


class AppListOutput(BaseOutputSchema):
    """Output schema for app list command."""

    apps: dict[str, Any] = Field(..., description="Configured applications keyed by name")


register_output_schema("app", "setup", AppSetupOutput)
register_output_schema("app", "list", AppListOutput)
