"""
Plain text standings files.

The first non-blank line holds the number of teams N, followed by one line per
team: a name without whitespace, wins, losses, games remaining, then N counts
of games left against each team in file order.

    4
    Atlanta       83 71  8  0 1 6 1
    Philadelphia  80 79  3  1 0 0 2
    New_York      78 78  6  6 0 0 0
    Montreal      77 82  3  1 2 0 0
"""

import logging
from pathlib import Path
from typing import List, Tuple

from .base import StandingsSource, SourceError, SourceNotFoundError
from ..solver.models import StandingsModel, TeamRecord, MalformedInputError


logger = logging.getLogger(__name__)


def _parse_int(token: str, line_no: int, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise MalformedInputError(f"Line {line_no}: {what} is not an integer: {token!r}")


def parse_standings_text(text: str) -> StandingsModel:
    """
    Parse standings in the plain text format.

    Raises:
        MalformedInputError: If the header or any team line is invalid
    """
    lines: List[Tuple[int, str]] = [
        (no, line.strip())
        for no, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]
    if not lines:
        raise MalformedInputError("Standings are empty")

    header_no, header = lines[0]
    team_count = _parse_int(header, header_no, "team count")
    if team_count < 0:
        raise MalformedInputError(f"Line {header_no}: team count must be non-negative")

    rows = lines[1:]
    if len(rows) != team_count:
        raise MalformedInputError(
            f"Declared {team_count} teams but found {len(rows)} team lines"
        )

    records = []
    for line_no, line in rows:
        fields = line.split()
        expected = 4 + team_count
        if len(fields) != expected:
            raise MalformedInputError(
                f"Line {line_no}: expected {expected} fields, got {len(fields)}"
            )

        name = fields[0]
        wins = _parse_int(fields[1], line_no, "wins")
        losses = _parse_int(fields[2], line_no, "losses")
        remaining = _parse_int(fields[3], line_no, "remaining")
        against = tuple(_parse_int(tok, line_no, "games against") for tok in fields[4:])
        records.append(TeamRecord(name, wins, losses, remaining, against))

    return StandingsModel(records, team_count=team_count)


def read_file(path: Path) -> str:
    """Read a UTF-8 standings file, mapping failures onto source and input errors."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SourceNotFoundError(f"Standings file not found: {path}")
    except OSError as e:
        raise SourceError(f"Could not read {path}: {e}")
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"{path} is not UTF-8 text: {e}")


class TextFileSource(StandingsSource):
    """Standings from a plain text file."""

    @property
    def source_name(self) -> str:
        return "text"

    async def load(self) -> StandingsModel:
        text = read_file(Path(self.location))
        standings = parse_standings_text(text)
        logger.info(f"Loaded {standings.team_count()} teams from {self.location}")
        return standings
