"""Schedule domain models."""

from dataclasses import dataclass
from datetime import datetime, time

from bart_client.domain.models.station import Station


@dataclass(frozen=True)
class Schedule:
    """A timetable version published by BART."""

    number: int
    effective_date: datetime


@dataclass(frozen=True)
class ScheduledStop:
    """A single stop of a scheduled train.

    scheduled_time is None when the train passes the station without stopping.
    """

    station: Station
    scheduled_time: time | None
    bike_allowed: bool


@dataclass(frozen=True)
class TrainSchedule:
    """The ordered stops of one train within a route schedule."""

    index: int
    stops: tuple[ScheduledStop, ...] = ()


@dataclass(frozen=True)
class RouteSchedule:
    """All trains of a route for one schedule."""

    number: int
    trains: tuple[TrainSchedule, ...] = ()
    message: str | None = None
