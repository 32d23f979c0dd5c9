"""BART real-time departure repository adapter."""

import logging

from bart_client.adapters.bart_api.constants import CMD_DEPARTURES, GROUP_ESTIMATES
from bart_client.adapters.bart_api.departure_parser import DepartureParser
from bart_client.adapters.bart_api.http_client import BartHttpClient
from bart_client.domain.models.departure import Departure
from bart_client.domain.models.station import Station
from bart_client.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)


class BartDepartureRepository(DepartureRepository):
    """Adapter for the BART estimated departures (etd) endpoint."""

    def __init__(self, client: BartHttpClient) -> None:
        """Initialize with the shared BART HTTP client."""
        self._client = client

    async def get_departures_by_station(self, station: Station) -> list[Departure]:
        """Get the estimated departures for a station.

        Args:
            station: Station to look up; only the abbreviation is used.
                "ALL" returns departures for every station.

        Returns:
            List of Departure objects, one per destination.
        """
        try:
            return await self._client.make_request(
                GROUP_ESTIMATES,
                CMD_DEPARTURES,
                {"orig": station.abbreviation},
                DepartureParser.parse_departures,
            )
        except Exception as e:
            logger.error(f"Error fetching departures for station '{station.abbreviation}': {e}")
            raise
