"""
Abstract base class for standings sources.

A source knows where a division's standings live (a file, a URL) and how to
turn them into a StandingsModel. Parsing is delegated to the format parsers
in text.py and document.py.
"""

from abc import ABC, abstractmethod

from ..solver.models import StandingsModel


class StandingsSource(ABC):
    """Abstract base class for standings sources."""

    def __init__(self, location: str):
        self.location = location

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.location!r})"

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return the source kind (e.g., 'text', 'json', 'http')."""
        pass

    @abstractmethod
    async def load(self) -> StandingsModel:
        """
        Load and parse the standings.

        Returns:
            The standings snapshot

        Raises:
            SourceNotFoundError: If the standings cannot be found
            SourceError: If the standings cannot be read
            MalformedInputError: If the standings cannot be parsed
        """
        pass


class SourceError(Exception):
    """Raised when there's an error reading standings from a source."""
    pass


class SourceNotFoundError(SourceError):
    """Raised when the standings file or resource does not exist."""
    pass
