"""Application settings section of dots configuration."""

from pydantic import BaseModel, ConfigDict, Field


class AppConfig(BaseModel):
    """Settings links for one application.

    ``links`` maps a target (~ is expanded) to its source in the dotfiles dir.
    Sources may be files or directories.
    """

    model_config = ConfigDict(extra="forbid")

    links: dict[str, str] = Field(..., description="Target -> source")
    auto_install: bool = Field(False, description="Set up as part of `dots install`")


def default_apps() -> dict[str, AppConfig]:
    return {
        "claude": AppConfig(
            links={
                "~/.claude/settings.json": "claude/settings.json",
                "~/.claude/skills": "claude/skills",
                "~/.claude/commands": "claude/commands",
                "~/.claude/agents": "claude/agents",
                "~/.claude-mem/settings.json": "claude-mem/settings.json",
            }
        ),
        "gemini": AppConfig(
            links={
                "~/.gemini/settings.json": "gemini/settings.json",
                "~/.gemini/bin": "gemini/bin",
                "~/.gemini/skills": "gemini/skills",
                "~/.gemini/commands": "gemini/commands",
                "~/.gemini/agents": "gemini/agents",
            }
        ),
    }
