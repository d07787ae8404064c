"""Shared constants for dots directories and artefact names."""

DOTS_HOME_EXT = ".dots"  # user-level state/config directory suffix

CONFIG_FILENAME = "config.json"

LOG_FILENAME = "dots.log"

# Suffix appended to a pre-existing target before it is replaced by a link
BACKUP_SUFFIX = ".backup"
