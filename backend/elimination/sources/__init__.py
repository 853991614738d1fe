"""
Standings sources.

Provides a unified interface for loading a division's standings from
text files, JSON documents, or HTTP.
"""

from typing import Optional

from .base import (
    StandingsSource,
    SourceError,
    SourceNotFoundError
)
from .text import TextFileSource, parse_standings_text
from .document import JsonFileSource, parse_standings_document, parse_standings_json
from .http import HttpSource


def get_source(location: str, timeout: Optional[float] = None) -> StandingsSource:
    """
    Get the appropriate source for a standings location.

    Args:
        location: File path or http(s) URL
        timeout: HTTP timeout in seconds (URLs only)

    Returns:
        Standings source instance

    Raises:
        ValueError: If the location is empty
    """
    if not location:
        raise ValueError("A standings location is required")

    lowered = location.lower()

    if lowered.startswith(("http://", "https://")):
        if timeout is None:
            return HttpSource(location)
        return HttpSource(location, timeout=timeout)

    if lowered.endswith(".json"):
        return JsonFileSource(location)

    return TextFileSource(location)


__all__ = [
    "StandingsSource",
    "SourceError",
    "SourceNotFoundError",
    "TextFileSource",
    "JsonFileSource",
    "HttpSource",
    "parse_standings_text",
    "parse_standings_document",
    "parse_standings_json",
    "get_source",
]
