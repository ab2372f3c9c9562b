"""HTTP transport implementation using httpx."""

import logging
from typing import Any

import httpx

from akamaipurge.core.entities.agent_config import DispatcherConfig
from akamaipurge.core.exceptions import TransportError
from akamaipurge.core.interfaces.purge_transport import TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport:
    """httpx-based transport for the purge API.

    Each request runs on a short-lived ``httpx.AsyncClient`` bounded
    by the configured connect and read timeouts, unless a client is
    injected. An injected client is shared, never closed here, and
    used as configured.
    """

    def __init__(
        self,
        connect_timeout: float = 10.0,
        read_timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            connect_timeout: Seconds allowed to establish a connection.
            read_timeout: Seconds allowed for the remaining phases.
            client: Optional shared client.
            transport: Optional httpx transport for per-request clients,
                e.g. ``httpx.MockTransport`` in tests.
        """
        self._timeout = httpx.Timeout(read_timeout, connect=connect_timeout)
        self._client = client
        self._transport = transport

    @classmethod
    def from_config(cls, config: DispatcherConfig, **kwargs: Any) -> "HttpxTransport":
        """Create a transport with the timeouts of a DispatcherConfig."""
        return cls(
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
            **kwargs,
        )

    @property
    def timeout(self) -> httpx.Timeout:
        return self._timeout

    async def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        content: bytes | None = None,
    ) -> TransportResponse:
        """Send one request and read the full response.

        Args:
            method: HTTP method.
            url: Absolute endpoint URL.
            headers: Request headers, sent as given.
            content: Optional encoded request body.

        Returns:
            The response status, body and headers.

        Raises:
            TransportError: If the request could not be sent or read.
        """
        try:
            if self._client is not None:
                response = await self._client.request(
                    method, url, headers=headers, content=content
                )
            else:
                async with httpx.AsyncClient(
                    timeout=self._timeout,
                    transport=self._transport,
                ) as client:
                    response = await client.request(
                        method, url, headers=headers, content=content
                    )
        except httpx.RequestError as e:
            raise TransportError(f"{method} {url} failed: {e}", cause=e) from e

        logger.debug("%s %s -> %s", method, url, response.status_code)
        return TransportResponse(
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )
