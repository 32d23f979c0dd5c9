"""Station schedule domain models."""

from dataclasses import dataclass
from datetime import time

from bart_client.domain.models.station import Station


@dataclass(frozen=True)
class Train:
    """A train leaving a station, as listed in a station schedule."""

    line: str
    origin: Station
    head_station: Station
    origin_time: time
    destination_time: time
    index: int
    bike_allowed: bool


@dataclass(frozen=True)
class StationSchedule:
    """Every train scheduled to leave a station on a given date."""

    station: Station
    date: str
    number: int
    trains: tuple[Train, ...] = ()
