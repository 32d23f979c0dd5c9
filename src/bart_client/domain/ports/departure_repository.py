"""Departure repository port."""

from typing import Protocol

from bart_client.domain.models.departure import Departure
from bart_client.domain.models.station import Station


class DepartureRepository(Protocol):
    """Port for retrieving real-time departure estimates."""

    async def get_departures_by_station(self, station: Station) -> list[Departure]:
        """Get estimated departures for a station."""
        ...
