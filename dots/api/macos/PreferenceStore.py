"""OS preference store capability."""

from abc import ABC, abstractmethod
from pathlib import Path

from .DefaultsEntry import DefaultsEntry


class PreferenceStore(ABC):
    """Writes system preferences and nudges the apps that read them."""

    @abstractmethod
    def quit_app(self, app: str) -> None:
        """Ask an application to quit. Failures are ignored."""
        pass

    @abstractmethod
    def write(self, entry: DefaultsEntry) -> None:
        """Write one entry. Raises RuntimeError on failure."""
        pass

    @abstractmethod
    def unhide(self, path: Path) -> None:
        """Make path visible in Finder. Raises RuntimeError on failure."""
        pass

    @abstractmethod
    def restart_app(self, app: str) -> bool:
        """Kill an application so it relaunches with new settings. True if it was running."""
        pass
