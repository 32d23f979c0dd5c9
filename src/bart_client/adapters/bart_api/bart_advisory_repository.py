"""BART advisory repository adapter."""

from bart_client.adapters.bart_api.advisory_parser import AdvisoryParser
from bart_client.adapters.bart_api.constants import (
    CMD_ELEVATOR_ADVISORIES,
    CMD_SERVICE_ADVISORIES,
    CMD_TRAIN_COUNT,
    GROUP_ADVISORIES,
)
from bart_client.adapters.bart_api.http_client import BartHttpClient
from bart_client.domain.models.advisory import ServiceAdvisory
from bart_client.domain.ports.advisory_repository import AdvisoryRepository


class BartAdvisoryRepository(AdvisoryRepository):
    """Adapter for the BART advisory (bsa) endpoints."""

    def __init__(self, client: BartHttpClient) -> None:
        """Initialize with the shared BART HTTP client."""
        self._client = client

    async def get_service_advisories(self) -> list[ServiceAdvisory]:
        """Get all service advisories currently posted, using the `bsa` command.

        An empty list means BART reported no delays.
        """
        return await self._client.make_request(
            GROUP_ADVISORIES, CMD_SERVICE_ADVISORIES, {}, AdvisoryParser.parse_advisories
        )

    async def get_elevator_advisories(self) -> list[ServiceAdvisory]:
        """Get all elevator advisories currently posted, using the `elev` command.

        An empty list means all elevators are in service.
        """
        return await self._client.make_request(
            GROUP_ADVISORIES, CMD_ELEVATOR_ADVISORIES, {}, AdvisoryParser.parse_advisories
        )

    async def get_train_count(self) -> int:
        """Count the trains currently in service, using the `count` command."""
        return await self._client.make_request(
            GROUP_ADVISORIES, CMD_TRAIN_COUNT, {}, AdvisoryParser.parse_train_count
        )
