"""Schedule repository port."""

from typing import Protocol

from bart_client.domain.models.schedule import RouteSchedule, Schedule


class ScheduleRepository(Protocol):
    """Port for retrieving timetables."""

    async def get_current_schedules(self) -> list[Schedule]:
        """Get the currently relevant schedules."""
        ...

    async def get_route_schedule_by_date(self, route_number: int, date: str) -> RouteSchedule:
        """Get a route schedule for a date or date keyword."""
        ...

    async def get_route_schedule_by_schedule(
        self, route_number: int, schedule_number: int
    ) -> RouteSchedule:
        """Get a route schedule for a schedule number."""
        ...

    async def get_all_route_schedules_by_schedules(
        self, schedules: list[Schedule]
    ) -> list[RouteSchedule]:
        """Get the schedules of every route of every given schedule."""
        ...
