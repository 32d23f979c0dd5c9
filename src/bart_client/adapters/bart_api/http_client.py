"""HTTP client for BART API requests.

Every operation of the BART API is a GET to /api/<group>.aspx with the
command and the API key in the query string. BartHttpClient builds that
request, checks the status and hands the XML body to a per-operation decoder.
"""

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, TypeVar
from urllib.parse import urlencode

import aiohttp
from lxml import etree

from bart_client.adapters.api_request_logger import log_api_request
from bart_client.adapters.bart_api.constants import API_PATH_TEMPLATE
from bart_client.adapters.bart_api.xml_document import parse_document
from bart_client.adapters.config import BartConfig
from bart_client.domain.errors import (
    BartApiError,
    DecodeError,
    HTTPStatusError,
    TransportError,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

T = TypeVar("T")

# Turns the parsed <root> element into a typed result; receives the command name
Decoder = Callable[[etree._Element, str], T]


class BartHttpClient:
    """Request executor shared by all BART repositories.

    Holds no mutable state, so one instance can serve any number of
    concurrent callers.
    """

    def __init__(self, session: "ClientSession", config: BartConfig | None = None) -> None:
        """Initialize with an aiohttp session and optional configuration."""
        self._session = session
        self._config = config or BartConfig()

    @property
    def config(self) -> BartConfig:
        """Configuration the client was built with."""
        return self._config

    def build_url(self, group: str) -> str:
        """Build the endpoint URL for an endpoint group, without query string."""
        path = API_PATH_TEMPLATE.format(group=group)
        return f"{self._config.scheme}://{self._config.host}{path}"

    def build_params(self, command: str, params: Mapping[str, str] | None = None) -> dict[str, str]:
        """Build query parameters, with cmd and key taking precedence over caller values."""
        query = dict(params or {})
        query["cmd"] = command
        query["key"] = self._config.api_key
        return query

    async def make_request(
        self,
        group: str,
        command: str,
        params: Mapping[str, str] | None,
        decoder: "Decoder[T]",
        timeout: aiohttp.ClientTimeout | None = None,
    ) -> T:
        """Request a BART command and decode its response.

        Args:
            group: Endpoint group selecting /api/<group>.aspx (e.g. "stn").
            command: Command within the group (e.g. "stns").
            params: Extra query parameters; cmd and key are always overwritten.
            decoder: Turns the parsed <root> element into the result.
            timeout: Optional timeout overriding the configured one.

        Returns:
            Whatever the decoder returns.

        Raises:
            TransportError: The request could not be sent or the body not read.
            HTTPStatusError: The API answered with a status other than 200.
            DecodeError: The body is not the expected XML document.
            ParseError: A field did not match its expected layout.
            ValidationError: A field was outside its allowed values.
        """
        url = self.build_url(group)
        query = self.build_params(command, params)
        request_url = f"{url}?{urlencode(query)}"
        request_timeout = timeout or aiohttp.ClientTimeout(total=self._config.timeout_seconds)

        log_api_request("GET", url, query)

        try:
            async with self._session.get(url, params=query, timeout=request_timeout) as response:
                if response.status != 200:
                    logger.error(
                        f"BART API returned status {response.status} for '{command}' at {url}"
                    )
                    raise HTTPStatusError(response.status, request_url)
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            logger.warning(f"Error requesting '{command}' from {url}: {e}")
            raise TransportError(request_url, e) from e

        root = parse_document(body, command)
        try:
            return decoder(root, command)
        except BartApiError:
            raise
        except (ValueError, TypeError, AttributeError) as e:
            raise DecodeError(command, e) from e
