"""Domain layer - models, errors and ports."""

from bart_client.domain.errors import (
    BartApiError,
    DecodeError,
    HTTPStatusError,
    ParseError,
    TransportError,
    ValidationError,
)
from bart_client.domain.models import (
    AdvisoryType,
    Departure,
    Estimate,
    Route,
    RouteSchedule,
    Schedule,
    ServiceAdvisory,
    Station,
)
from bart_client.domain.ports import (
    AdvisoryRepository,
    DepartureRepository,
    RouteRepository,
    ScheduleRepository,
    StationRepository,
)

__all__ = [
    "AdvisoryRepository",
    "AdvisoryType",
    "BartApiError",
    "DecodeError",
    "Departure",
    "DepartureRepository",
    "Estimate",
    "HTTPStatusError",
    "ParseError",
    "Route",
    "RouteRepository",
    "RouteSchedule",
    "Schedule",
    "ScheduleRepository",
    "ServiceAdvisory",
    "Station",
    "StationRepository",
    "TransportError",
    "ValidationError",
]
