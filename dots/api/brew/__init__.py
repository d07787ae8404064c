"""Brew domain - Homebrew bundle install and export."""

from .BrewBundleInstaller import BrewBundleInstaller
from .PackageInstaller import PackageInstaller

__all__ = ["BrewBundleInstaller", "PackageInstaller"]
