"""State of a link target on disk."""

from enum import Enum


class LinkState(str, Enum):
    ABSENT = "absent"
    # Anything that is not a symlink: regular file or directory
    FILE = "file"
    LINKED = "linked"
    # Symlink pointing somewhere other than the source (or dangling / looping)
    SYMLINK = "symlink"
