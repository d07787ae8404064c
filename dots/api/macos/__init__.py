"""macOS domain - system preferences."""

from .DefaultsPreferenceStore import DefaultsPreferenceStore
from .PreferenceStore import PreferenceStore

__all__ = ["DefaultsPreferenceStore", "PreferenceStore"]
