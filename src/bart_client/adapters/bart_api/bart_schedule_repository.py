"""BART schedule repository adapter."""

import logging

from bart_client.adapters.bart_api.bart_route_repository import BartRouteRepository
from bart_client.adapters.bart_api.constants import (
    CMD_ROUTE_SCHEDULE,
    CMD_SCHEDULES,
    GROUP_SCHEDULES,
)
from bart_client.adapters.bart_api.http_client import BartHttpClient
from bart_client.adapters.bart_api.schedule_parser import ScheduleParser
from bart_client.domain.models.schedule import RouteSchedule, Schedule
from bart_client.domain.ports.route_repository import RouteRepository
from bart_client.domain.ports.schedule_repository import ScheduleRepository

logger = logging.getLogger(__name__)


class BartScheduleRepository(ScheduleRepository):
    """Adapter for the BART schedule endpoints."""

    def __init__(
        self, client: BartHttpClient, route_repository: RouteRepository | None = None
    ) -> None:
        """Initialize with the shared BART HTTP client and optional route repository."""
        self._client = client
        self._route_repository = route_repository or BartRouteRepository(client)

    async def get_current_schedules(self) -> list[Schedule]:
        """Get the currently relevant schedules."""
        return await self._client.make_request(
            GROUP_SCHEDULES, CMD_SCHEDULES, {}, ScheduleParser.parse_schedules
        )

    async def get_route_schedule_by_date(self, route_number: int, date: str) -> RouteSchedule:
        """Get a route schedule by route number and date.

        Args:
            route_number: Route number (e.g. 1).
            date: "MM/DD/YYYY" or one of WEEKDAY, SATURDAY, SUNDAY, TODAY, NOW.
        """
        params = {"route": str(route_number), "date": date}
        return await self._client.make_request(
            GROUP_SCHEDULES, CMD_ROUTE_SCHEDULE, params, ScheduleParser.parse_route_schedule
        )

    async def get_route_schedule_by_schedule(
        self, route_number: int, schedule_number: int
    ) -> RouteSchedule:
        """Get a route schedule by route number and schedule number."""
        params = {"route": str(route_number), "sched": str(schedule_number)}
        return await self._client.make_request(
            GROUP_SCHEDULES, CMD_ROUTE_SCHEDULE, params, ScheduleParser.parse_route_schedule
        )

    async def get_all_route_schedules_by_schedules(
        self, schedules: list[Schedule]
    ) -> list[RouteSchedule]:
        """Get the route schedule of every route of every given schedule.

        Requests are issued one after another; the first failure is raised.
        """
        route_schedules = []
        for schedule in schedules:
            routes = await self._route_repository.get_routes_by_schedule(schedule)
            logger.debug(f"Schedule #{schedule.number} has {len(routes)} route(s)")
            for route in routes:
                route_schedules.append(
                    await self.get_route_schedule_by_schedule(route.number, schedule.number)
                )
        return route_schedules
