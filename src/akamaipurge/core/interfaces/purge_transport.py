"""Purge transport interface."""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class TransportResponse:
    """Status and body of a purge API response."""

    status_code: int
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)


class IPurgeTransport(Protocol):
    """Contract for sending one HTTP request to the purge API.

    Transports perform exactly one request per call and never retry.
    Network and I/O failures must be raised as TransportError; any
    HTTP status, including errors, is returned as a response.
    """

    async def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        content: bytes | None = None,
    ) -> TransportResponse:
        """Send a request and read the full response.

        Args:
            method: HTTP method, ``"GET"`` or ``"POST"``.
            url: Absolute endpoint URL.
            headers: Request headers, sent as given.
            content: Optional encoded request body.

        Returns:
            The response status, body and headers.

        Raises:
            TransportError: If the request could not be sent or read.
        """
        ...
