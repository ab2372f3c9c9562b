"""Pytest configuration for akamaipurge tests."""

import pytest

from akamaipurge import Credentials, TransportError, TransportResponse


class RecordingTransport:
    """Transport double that records requests and replays a canned reply."""

    def __init__(
        self,
        status_code: int = 201,
        body: str = "",
        error: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.error = error
        self.calls: list[dict] = []

    async def send(self, method, url, headers, content=None):
        self.calls.append(
            {"method": method, "url": url, "headers": dict(headers), "content": content}
        )
        if self.error is not None:
            raise TransportError("send failed", cause=self.error)
        return TransportResponse(status_code=self.status_code, body=self.body)

    @property
    def last_call(self) -> dict:
        return self.calls[-1]


@pytest.fixture
def credentials() -> Credentials:
    """Credentials used across tests."""
    return Credentials(username="u", secret="p")


@pytest.fixture
def transport() -> RecordingTransport:
    """A transport answering 201 Created."""
    return RecordingTransport()


@pytest.fixture
def make_transport():
    """Factory for transports with a given reply or error."""
    return RecordingTransport
