"""
Standings served over HTTP.

JSON responses are parsed as standings documents; anything else is treated
as the plain text format.
"""

import logging

import httpx

from .base import StandingsSource, SourceError, SourceNotFoundError
from .document import parse_standings_json
from .text import parse_standings_text
from ..solver.models import StandingsModel


logger = logging.getLogger(__name__)


class HttpSource(StandingsSource):
    """Standings fetched from a URL."""

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None
    ):
        """
        Initialize the HTTP source.

        Args:
            url: Address of the standings file or document
            timeout: HTTP request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        super().__init__(url)
        self.timeout = timeout
        self.transport = transport

    @property
    def source_name(self) -> str:
        return "http"

    async def _fetch(self) -> httpx.Response:
        """
        Fetch the standings resource.

        Raises:
            SourceNotFoundError: If the resource doesn't exist
            SourceError: If there's an HTTP or network error
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(self.location)

                if response.status_code == 404:
                    raise SourceNotFoundError(f"Standings not found: {self.location}")

                response.raise_for_status()
                return response

            except httpx.HTTPStatusError as e:
                raise SourceError(f"HTTP error fetching standings: {e}")
            except httpx.RequestError as e:
                raise SourceError(f"Network error: {e}")

    async def load(self) -> StandingsModel:
        response = await self._fetch()
        content_type = response.headers.get("content-type", "")

        if "json" in content_type:
            standings = parse_standings_json(response.text)
        else:
            standings = parse_standings_text(response.text)

        logger.info(f"Loaded {standings.team_count()} teams from {self.location}")
        return standings
