"""Config API module."""

from .DotsConfig import DotsConfig
from .get_home_dir import get_home_dir

__all__ = ["DotsConfig", "get_home_dir"]
