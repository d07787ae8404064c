"""Package manager capability."""

from abc import ABC, abstractmethod
from pathlib import Path


class PackageInstaller(ABC):
    """Bundle-file-driven package manager.

    Implementations raise ``RuntimeError`` when the underlying tool fails.
    """

    @abstractmethod
    def is_available(self) -> bool:
        """True if the package manager can be invoked."""
        pass

    @abstractmethod
    def bootstrap(self) -> None:
        """Install the package manager itself."""
        pass

    @abstractmethod
    def install_bundle(self, bundle_file: Path) -> None:
        """Install everything listed in bundle_file."""
        pass

    @abstractmethod
    def dump_bundle(self, bundle_file: Path) -> None:
        """Write the currently installed packages to bundle_file, replacing it."""
        pass
