"""Route domain model."""

from dataclasses import dataclass

from bart_client.domain.models.station import Station


@dataclass(frozen=True)
class Route:
    """Represents a BART route (a colored line in one direction)."""

    name: str
    abbreviation: str
    route_id: str
    number: int
    color: str = ""
    hex_color: str = ""
    holidays: int = 0  # Opaque upstream value, passed through untouched
    station_count: int = 0
    stations: tuple[Station, ...] = ()
