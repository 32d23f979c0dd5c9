"""Domain models for the BART API."""

from bart_client.domain.models.advisory import AdvisoryType, ServiceAdvisory
from bart_client.domain.models.departure import Departure, Estimate
from bart_client.domain.models.route import Route
from bart_client.domain.models.schedule import (
    RouteSchedule,
    Schedule,
    ScheduledStop,
    TrainSchedule,
)
from bart_client.domain.models.station import Station
from bart_client.domain.models.train import StationSchedule, Train

__all__ = [
    "AdvisoryType",
    "Departure",
    "Estimate",
    "Route",
    "RouteSchedule",
    "Schedule",
    "ScheduledStop",
    "ServiceAdvisory",
    "Station",
    "StationSchedule",
    "Train",
    "TrainSchedule",
]
