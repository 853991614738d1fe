"""
Division Elimination Solver

Max-flow elimination checks over a fixed standings snapshot.
"""

from .models import TeamRecord, StandingsModel, MalformedInputError, UnknownTeamError
from .network import (
    build_network,
    matchup_count,
    matchup_vertex,
    team_vertex,
    sink_vertex,
    vertex_count,
)
from .maxflow import MaxFlow, solve_max_flow
from .engine import EliminationEngine, EliminationResult
from .report import build_report, format_report_lines

__all__ = [
    # Models
    "TeamRecord",
    "StandingsModel",
    "MalformedInputError",
    "UnknownTeamError",
    # Network
    "build_network",
    "matchup_count",
    "matchup_vertex",
    "team_vertex",
    "sink_vertex",
    "vertex_count",
    # Max flow
    "MaxFlow",
    "solve_max_flow",
    # Engine
    "EliminationEngine",
    "EliminationResult",
    # Reports
    "build_report",
    "format_report_lines",
]
