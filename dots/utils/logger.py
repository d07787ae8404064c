"""Unified dots logging."""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import DOTS_HOME_EXT, LOG_FILENAME

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(dots_home: Path | None = None, level: int = logging.INFO) -> None:
    """Configure unified dots logging.

    Args:
        dots_home: Path to dots home directory. If None, derived from environment.
        level: Level for the ``dots`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if dots_home is None:
        env_home = os.environ.get("DOTS_HOME")
        dots_home = Path(env_home).expanduser().resolve() if env_home else Path.home() / DOTS_HOME_EXT

    dots_home.mkdir(parents=True, exist_ok=True)
    log_file = dots_home / LOG_FILENAME

    root_logger = logging.getLogger("dots")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _CONFIGURED:
        configure_logging()

    return logging.getLogger(f"dots.{name}")
