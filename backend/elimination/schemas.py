"""
Pydantic schemas for standings documents and elimination reports.
"""

from typing import Optional, List
from pydantic import BaseModel, Field


# ============== Standings Schemas ==============

class TeamRecordSchema(BaseModel):
    """One team row in a standings document."""
    name: str = Field(..., min_length=1)
    wins: int = Field(..., ge=0)
    losses: int = Field(..., ge=0)
    remaining: int = Field(..., ge=0)
    against: List[int] = Field(default_factory=list)


class StandingsDocument(BaseModel):
    """A division's standings as a JSON document."""
    team_count: Optional[int] = Field(None, ge=0)
    teams: List[TeamRecordSchema]


# ============== Report Schemas ==============

class TeamVerdict(BaseModel):
    """Elimination verdict for a single team."""
    name: str
    wins: int
    losses: int
    remaining: int
    eliminated: bool
    trivial: bool = False
    certificate: List[str] = Field(default_factory=list)


class EliminationReport(BaseModel):
    """Verdicts for every team in a division."""
    team_count: int
    teams: List[TeamVerdict]
    eliminated_count: int


# ============== Error Schemas ==============

class ErrorReport(BaseModel):
    """Error output for the command line in JSON mode."""
    detail: str
    code: Optional[str] = None
