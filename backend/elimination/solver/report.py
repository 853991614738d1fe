"""
Division-wide elimination reports.
"""

from typing import List, Optional, Iterable

from .engine import EliminationEngine
from ..schemas import EliminationReport, TeamVerdict


def build_report(
    engine: EliminationEngine,
    teams: Optional[Iterable[str]] = None
) -> EliminationReport:
    """
    Run the elimination check for each team.

    Args:
        engine: Engine over the division's standings
        teams: Teams to include (defaults to every team, in index order)

    Returns:
        EliminationReport with one verdict per team

    Raises:
        UnknownTeamError: If a requested team is not in the standings
    """
    standings = engine.standings
    names = list(engine.teams()) if teams is None else list(teams)

    verdicts = []
    for name in names:
        result = engine.analyze(name)
        verdicts.append(TeamVerdict(
            name=name,
            wins=standings.wins(name),
            losses=standings.losses(name),
            remaining=standings.remaining(name),
            eliminated=result.eliminated,
            trivial=result.trivial,
            certificate=list(result.certificate)
        ))

    return EliminationReport(
        team_count=standings.team_count(),
        teams=verdicts,
        eliminated_count=sum(1 for v in verdicts if v.eliminated)
    )


def format_report_lines(report: EliminationReport) -> List[str]:
    """Render a report as one line per team."""
    lines = []
    for verdict in report.teams:
        if verdict.eliminated:
            members = " ".join(verdict.certificate)
            lines.append(f"{verdict.name} is eliminated by the subset R = {{ {members} }}")
        else:
            lines.append(f"{verdict.name} is not eliminated")
    return lines
