"""Shared fixtures for BART client tests."""

from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from bart_client.adapters.bart_api import BartHttpClient
from bart_client.adapters.config import BartConfig

TEST_API_KEY = "TEST-KEY"


def _create_mock_session(body: bytes = b"<root/>", status: int = 200) -> MagicMock:
    """Create an aiohttp-like session whose get() yields a single canned response."""
    response = MagicMock()
    response.status = status
    response.read = AsyncMock(return_value=body)

    session = MagicMock()
    session.get.return_value.__aenter__ = AsyncMock(return_value=response)
    session.get.return_value.__aexit__ = AsyncMock(return_value=False)
    return session


@pytest.fixture
def config() -> BartConfig:
    """Configuration with a fixed test key and default host."""
    return BartConfig(api_key=TEST_API_KEY, host="api.bart.gov", scheme="http")


@pytest.fixture
def make_session() -> Callable[..., MagicMock]:
    """Factory for mock sessions returning a given body and status."""
    return _create_mock_session


@pytest.fixture
def make_client(config: BartConfig) -> Callable[..., tuple[BartHttpClient, MagicMock]]:
    """Factory for a BartHttpClient backed by a mock session."""

    def _make(body: bytes = b"<root/>", status: int = 200) -> tuple[BartHttpClient, MagicMock]:
        session = _create_mock_session(body, status)
        return BartHttpClient(session, config), session

    return _make
