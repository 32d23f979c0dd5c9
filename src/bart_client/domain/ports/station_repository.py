"""Station repository port."""

from typing import Protocol

from bart_client.domain.models.station import Station
from bart_client.domain.models.train import StationSchedule


class StationRepository(Protocol):
    """Port for retrieving station information."""

    async def get_all_stations(self) -> list[Station]:
        """Get every BART station."""
        ...

    async def get_station_schedule(
        self, station: Station, date: str | None = None
    ) -> StationSchedule:
        """Get the trains scheduled to leave a station."""
        ...
