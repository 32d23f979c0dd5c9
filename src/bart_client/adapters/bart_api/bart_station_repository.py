"""BART station repository adapter."""

import logging

from bart_client.adapters.bart_api.constants import (
    CMD_STATION_SCHEDULE,
    CMD_STATIONS,
    GROUP_SCHEDULES,
    GROUP_STATIONS,
)
from bart_client.adapters.bart_api.http_client import BartHttpClient
from bart_client.adapters.bart_api.schedule_parser import ScheduleParser
from bart_client.adapters.bart_api.station_parser import StationParser
from bart_client.domain.models.station import Station
from bart_client.domain.models.train import StationSchedule
from bart_client.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class BartStationRepository(StationRepository):
    """Adapter for the BART station endpoints."""

    def __init__(self, client: BartHttpClient) -> None:
        """Initialize with the shared BART HTTP client."""
        self._client = client

    async def get_all_stations(self) -> list[Station]:
        """Get all BART stations using the `stns` command."""
        return await self._client.make_request(
            GROUP_STATIONS, CMD_STATIONS, {}, StationParser.parse_stations
        )

    async def get_station_schedule(
        self, station: Station, date: str | None = None
    ) -> StationSchedule:
        """Get the trains scheduled to leave a station using the `stnsched` command.

        Args:
            station: Station to look up; only the abbreviation is used.
            date: "MM/DD/YYYY", "today" or "now". BART defaults to today.

        Returns:
            StationSchedule with the station's trains in departure order.
        """
        params = {"orig": station.abbreviation}
        if date:
            params["date"] = date

        try:
            return await self._client.make_request(
                GROUP_SCHEDULES, CMD_STATION_SCHEDULE, params, ScheduleParser.parse_station_schedule
            )
        except Exception as e:
            logger.error(f"Error fetching station schedule for '{station.abbreviation}': {e}")
            raise
