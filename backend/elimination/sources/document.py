"""
JSON standings documents.

    {
      "team_count": 2,
      "teams": [
        {"name": "Atlanta", "wins": 83, "losses": 71, "remaining": 8, "against": [0, 1]},
        {"name": "Montreal", "wins": 77, "losses": 82, "remaining": 3, "against": [1, 0]}
      ]
    }

`team_count` is optional; when present it must match the number of teams.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .base import StandingsSource
from .text import read_file
from ..schemas import StandingsDocument
from ..solver.models import StandingsModel, TeamRecord, MalformedInputError


logger = logging.getLogger(__name__)


def parse_standings_document(data: Any) -> StandingsModel:
    """
    Build standings from decoded JSON.

    Raises:
        MalformedInputError: If the document fails validation
    """
    try:
        document = StandingsDocument.model_validate(data)
    except ValidationError as e:
        raise MalformedInputError(f"Invalid standings document: {e}")

    records = [
        TeamRecord(
            name=team.name,
            wins=team.wins,
            losses=team.losses,
            remaining=team.remaining,
            against=tuple(team.against)
        )
        for team in document.teams
    ]
    return StandingsModel(records, team_count=document.team_count)


def parse_standings_json(text: str) -> StandingsModel:
    """Decode and parse a JSON standings document."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedInputError(f"Standings are not valid JSON: {e}")
    return parse_standings_document(data)


class JsonFileSource(StandingsSource):
    """Standings from a JSON document on disk."""

    @property
    def source_name(self) -> str:
        return "json"

    async def load(self) -> StandingsModel:
        text = read_file(Path(self.location))
        standings = parse_standings_json(text)
        logger.info(f"Loaded {standings.team_count()} teams from {self.location}")
        return standings
