"""BART API adapters."""

from bart_client.adapters.bart_api.bart_advisory_repository import BartAdvisoryRepository
from bart_client.adapters.bart_api.bart_departure_repository import BartDepartureRepository
from bart_client.adapters.bart_api.bart_route_repository import BartRouteRepository
from bart_client.adapters.bart_api.bart_schedule_repository import BartScheduleRepository
from bart_client.adapters.bart_api.bart_station_repository import BartStationRepository
from bart_client.adapters.bart_api.http_client import BartHttpClient

__all__ = [
    "BartAdvisoryRepository",
    "BartDepartureRepository",
    "BartHttpClient",
    "BartRouteRepository",
    "BartScheduleRepository",
    "BartStationRepository",
]
