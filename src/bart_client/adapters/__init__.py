"""Adapters layer - external system integrations."""

from bart_client.adapters.bart_api import (
    BartAdvisoryRepository,
    BartDepartureRepository,
    BartHttpClient,
    BartRouteRepository,
    BartScheduleRepository,
    BartStationRepository,
)
from bart_client.adapters.config import BartConfig

__all__ = [
    "BartAdvisoryRepository",
    "BartConfig",
    "BartDepartureRepository",
    "BartHttpClient",
    "BartRouteRepository",
    "BartScheduleRepository",
    "BartStationRepository",
]
