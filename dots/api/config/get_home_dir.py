"""Get dots home directory path or path under it."""

import os
from pathlib import Path

from ...constants import DOTS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get dots home directory path or path under it.

    Checks DOTS_HOME environment variable first, defaults to ~/.dots if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.dots")
        >>> get_home_dir("config.json")
        Path("/Users/user/.dots/config.json")
    """
    dots_home_env = os.environ.get("DOTS_HOME")
    if dots_home_env:
        dots_home = Path(dots_home_env).expanduser().resolve()
    else:
        dots_home = Path.home() / DOTS_HOME_EXT

    return dots_home / Path(*parts) if parts else dots_home
