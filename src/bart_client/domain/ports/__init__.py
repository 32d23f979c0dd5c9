"""Ports (interfaces) for the ports-and-adapters architecture."""

from bart_client.domain.ports.advisory_repository import AdvisoryRepository
from bart_client.domain.ports.departure_repository import DepartureRepository
from bart_client.domain.ports.route_repository import RouteRepository
from bart_client.domain.ports.schedule_repository import ScheduleRepository
from bart_client.domain.ports.station_repository import StationRepository

__all__ = [
    "AdvisoryRepository",
    "DepartureRepository",
    "RouteRepository",
    "ScheduleRepository",
    "StationRepository",
]
