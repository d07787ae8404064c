"""Utility helpers."""

from .get_package_version import get_package_version
from .logger import configure_logging, get_logger
from .normalize_path import normalize_path

__all__ = ["configure_logging", "get_logger", "get_package_version", "normalize_path"]
