"""
Elimination engine: decides whether a team can still finish first.

A team is trivially eliminated when another team already has more wins than
it can reach. Otherwise the remaining games are modelled as a flow network
(see network.py) and the team is eliminated exactly when the maximum flow
cannot carry every remaining game to the sink.
"""

from dataclasses import dataclass
from typing import KeysView, List, Optional, Tuple

from .maxflow import solve_max_flow
from .models import StandingsModel
from .network import SOURCE, build_network, sink_vertex, team_vertex


@dataclass(frozen=True)
class EliminationResult:
    """Outcome of one elimination query."""

    team: str
    eliminated: bool
    trivial: bool = False
    certificate: Tuple[str, ...] = ()
    flow_value: Optional[int] = None
    total_capacity: Optional[int] = None


class EliminationEngine:
    """Answers elimination queries against a read-only standings snapshot."""

    def __init__(self, standings: StandingsModel):
        self.standings = standings

    # Standings passthroughs

    def teams(self) -> KeysView[str]:
        return self.standings.team_names()

    def wins(self, team: str) -> int:
        return self.standings.wins(team)

    def losses(self, team: str) -> int:
        return self.standings.losses(team)

    def remaining(self, team: str) -> int:
        return self.standings.remaining(team)

    def against(self, team1: str, team2: str) -> int:
        return self.standings.against(team1, team2)

    # Queries

    def is_eliminated(self, team: str) -> bool:
        """True if `team` cannot finish with at least as many wins as everyone else."""
        return self.analyze(team).eliminated

    def certificate_of_elimination(self, team: str) -> Optional[List[str]]:
        """
        Teams that together prove `team` is eliminated.

        Returns:
            None if the team is not eliminated, otherwise the certificate
            teams in index order
        """
        result = self.analyze(team)
        if not result.eliminated:
            return None
        return list(result.certificate)

    def analyze(self, team: str) -> EliminationResult:
        """
        Run the full elimination check for one team.

        Raises:
            UnknownTeamError: If the team is not in the standings
        """
        target = self.standings.index_of(team)

        leader = self._trivial_witness(target)
        if leader is not None:
            return EliminationResult(
                team=team,
                eliminated=True,
                trivial=True,
                certificate=(self.standings.name_at(leader),)
            )

        wins = self.standings.wins_by_index
        n = len(wins)
        network, total_capacity = build_network(
            wins,
            self.standings.remaining_by_index,
            self.standings.against_matrix,
            target
        )
        flow = solve_max_flow(network, SOURCE, sink_vertex(n))

        if flow.value >= total_capacity:
            return EliminationResult(
                team=team,
                eliminated=False,
                flow_value=flow.value,
                total_capacity=total_capacity
            )

        # Source side of the min cut; the target can only land there through
        # its own games, which never count against it
        certificate = tuple(
            self.standings.name_at(i)
            for i in range(n)
            if i != target and flow.in_cut(team_vertex(i, n))
        )
        return EliminationResult(
            team=team,
            eliminated=True,
            certificate=certificate,
            flow_value=flow.value,
            total_capacity=total_capacity
        )

    def _trivial_witness(self, target: int) -> Optional[int]:
        """Lowest index team whose wins already exceed target's best case."""
        wins = self.standings.wins_by_index
        best_case = wins[target] + self.standings.remaining_by_index[target]
        for i, w in enumerate(wins):
            if w > best_case:
                return i
        return None
