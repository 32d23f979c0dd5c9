"""Advisory repository port."""

from typing import Protocol

from bart_client.domain.models.advisory import ServiceAdvisory


class AdvisoryRepository(Protocol):
    """Port for retrieving advisories and system status."""

    async def get_service_advisories(self) -> list[ServiceAdvisory]:
        """Get currently posted service advisories."""
        ...

    async def get_elevator_advisories(self) -> list[ServiceAdvisory]:
        """Get currently posted elevator advisories."""
        ...

    async def get_train_count(self) -> int:
        """Get the number of trains currently in service."""
        ...
