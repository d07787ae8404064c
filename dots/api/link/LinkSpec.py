"""A single desired symbolic link."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ...constants import BACKUP_SUFFIX


class LinkSpec(BaseModel):
    """Source/target pair describing one desired symbolic link.

    ``source`` is not required to exist: linking a missing source yields a
    dangling link.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    source: Path = Field(..., description="Path the link points to")
    target: Path = Field(..., description="Path where the link is created")

    @property
    def backup(self) -> Path:
        """Path a pre-existing non-symlink target is moved to."""
        return self.target.with_name(self.target.name + BACKUP_SUFFIX)
