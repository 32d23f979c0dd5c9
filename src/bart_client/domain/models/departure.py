"""Real-time departure domain models."""

from dataclasses import dataclass

from bart_client.domain.models.station import Station


@dataclass(frozen=True)
class Estimate:
    """Estimated arrival of a single train."""

    minutes: int
    platform: int
    direction: str
    length: int
    color: str
    hex_color: str
    bike_flag: str


@dataclass(frozen=True)
class Departure:
    """Upcoming trains from a station towards one destination."""

    destination: Station
    limited: bool
    estimates: tuple[Estimate, ...] = ()
