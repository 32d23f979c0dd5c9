"""BART route repository adapter."""

import logging

from bart_client.adapters.bart_api.constants import CMD_ROUTE_INFO, CMD_ROUTES, GROUP_ROUTES
from bart_client.adapters.bart_api.http_client import BartHttpClient
from bart_client.adapters.bart_api.route_parser import RouteParser
from bart_client.domain.errors import DecodeError
from bart_client.domain.models.route import Route
from bart_client.domain.models.schedule import Schedule
from bart_client.domain.ports.route_repository import RouteRepository

logger = logging.getLogger(__name__)

ALL_ROUTES = "all"


class BartRouteRepository(RouteRepository):
    """Adapter for the BART route endpoints."""

    def __init__(self, client: BartHttpClient) -> None:
        """Initialize with the shared BART HTTP client."""
        self._client = client

    async def get_current_routes(self) -> list[Route]:
        """Get the routes currently active."""
        return await self._client.make_request(
            GROUP_ROUTES, CMD_ROUTES, {}, RouteParser.parse_routes
        )

    async def get_routes_by_schedule(self, schedule: Schedule) -> list[Route]:
        """Get the routes of a schedule by its number."""
        return await self._client.make_request(
            GROUP_ROUTES, CMD_ROUTES, {"sched": str(schedule.number)}, RouteParser.parse_routes
        )

    async def get_route_info_by_number(self, route_number: int) -> Route:
        """Get a route with its station list.

        Raises:
            DecodeError: The response does not contain any route.
        """
        routes = await self._client.make_request(
            GROUP_ROUTES, CMD_ROUTE_INFO, {"route": str(route_number)}, RouteParser.parse_routes
        )
        if not routes:
            logger.error(f"'{CMD_ROUTE_INFO}' returned no route for route #{route_number}")
            raise DecodeError(CMD_ROUTE_INFO, f"no route in response for route #{route_number}")
        return routes[0]

    async def get_all_route_info(self) -> list[Route]:
        """Get every route with its station list."""
        return await self._client.make_request(
            GROUP_ROUTES, CMD_ROUTE_INFO, {"route": ALL_ROUTES}, RouteParser.parse_routes
        )
