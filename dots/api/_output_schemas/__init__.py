"""Output schemas for all API commands.

Importing this package registers every schema with the registry.
"""

from . import app, bootstrap, brew, config, link, macos, vscode, zsh
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = [
    "BaseOutputSchema",
    "app",
    "bootstrap",
    "brew",
    "config",
    "get_output_schema",
    "link",
    "macos",
    "register_output_schema",
    "vscode",
    "zsh",
]
