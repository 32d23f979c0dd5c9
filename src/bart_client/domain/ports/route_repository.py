"""Route repository port."""

from typing import Protocol

from bart_client.domain.models.route import Route
from bart_client.domain.models.schedule import Schedule


class RouteRepository(Protocol):
    """Port for retrieving route information."""

    async def get_current_routes(self) -> list[Route]:
        """Get the routes of the current schedule."""
        ...

    async def get_routes_by_schedule(self, schedule: Schedule) -> list[Route]:
        """Get the routes of a given schedule."""
        ...

    async def get_route_info_by_number(self, route_number: int) -> Route:
        """Get a route including its station list."""
        ...

    async def get_all_route_info(self) -> list[Route]:
        """Get every route including its station list."""
        ...
