"""
Data models for the elimination solver.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, KeysView, List, Optional, Tuple


class MalformedInputError(ValueError):
    """Raised when standings data is internally inconsistent."""
    pass


class UnknownTeamError(ValueError):
    """Raised when a query names a team that is not in the standings."""
    pass


@dataclass(frozen=True)
class TeamRecord:
    """One row of the standings table as supplied by a loader."""

    name: str
    wins: int
    losses: int
    remaining: int
    against: Tuple[int, ...] = field(default_factory=tuple)


def _is_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class StandingsModel:
    """
    Frozen snapshot of a division's standings.

    Teams are indexed 0..N-1 in the order their records were supplied. The
    against matrix is assumed symmetric with a zero diagonal; only its shape
    is checked here.
    """

    def __init__(self, records: Iterable[TeamRecord], team_count: Optional[int] = None):
        """
        Build the model from team records.

        Args:
            records: Team records in index order
            team_count: Declared number of teams, checked against the records

        Raises:
            MalformedInputError: If the count, any value, or any name is invalid
        """
        records = list(records)
        n = len(records)

        if team_count is not None and team_count != n:
            raise MalformedInputError(
                f"Declared {team_count} teams but {n} records were supplied"
            )

        index: Dict[str, int] = {}
        for i, record in enumerate(records):
            if not isinstance(record.name, str) or not record.name:
                raise MalformedInputError(f"Team at position {i} has no name")
            if record.name in index:
                raise MalformedInputError(f"Duplicate team name: {record.name}")

            for label in ("wins", "losses", "remaining"):
                if not _is_count(getattr(record, label)):
                    raise MalformedInputError(
                        f"{record.name}: {label} must be a non-negative integer, "
                        f"got {getattr(record, label)!r}"
                    )

            if len(record.against) != n:
                raise MalformedInputError(
                    f"{record.name}: expected {n} remaining-against values, "
                    f"got {len(record.against)}"
                )
            for value in record.against:
                if not _is_count(value):
                    raise MalformedInputError(
                        f"{record.name}: remaining-against values must be "
                        f"non-negative integers, got {value!r}"
                    )

            index[record.name] = i

        self._records: Tuple[TeamRecord, ...] = tuple(
            TeamRecord(r.name, r.wins, r.losses, r.remaining, tuple(r.against))
            for r in records
        )
        self._index = index
        self._wins = tuple(r.wins for r in self._records)
        self._losses = tuple(r.losses for r in self._records)
        self._remaining = tuple(r.remaining for r in self._records)
        self._against = tuple(r.against for r in self._records)

    def __repr__(self) -> str:
        return f"StandingsModel(teams={list(self._index)!r})"

    def team_count(self) -> int:
        return len(self._records)

    def team_names(self) -> KeysView[str]:
        """All team names; the view can be iterated any number of times."""
        return self._index.keys()

    def records(self) -> List[TeamRecord]:
        """Team records in index order."""
        return list(self._records)

    def index_of(self, team: str) -> int:
        """Stable index of a team. Raises UnknownTeamError for unknown names."""
        if not team or team not in self._index:
            raise UnknownTeamError(f"Unknown team: {team!r}")
        return self._index[team]

    def name_at(self, index: int) -> str:
        return self._records[index].name

    def wins(self, team: str) -> int:
        return self._wins[self.index_of(team)]

    def losses(self, team: str) -> int:
        return self._losses[self.index_of(team)]

    def remaining(self, team: str) -> int:
        return self._remaining[self.index_of(team)]

    def against(self, team1: str, team2: str) -> int:
        """Games still to be played between two teams."""
        i = self.index_of(team1)
        j = self.index_of(team2)
        return self._against[i][j]

    # Index-keyed views used by the network builder

    @property
    def wins_by_index(self) -> Tuple[int, ...]:
        return self._wins

    @property
    def remaining_by_index(self) -> Tuple[int, ...]:
        return self._remaining

    @property
    def against_matrix(self) -> Tuple[Tuple[int, ...], ...]:
        return self._against
