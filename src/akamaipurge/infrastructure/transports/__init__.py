"""Purge transport implementations."""

from akamaipurge.infrastructure.transports.httpx_transport import HttpxTransport

__all__ = ["HttpxTransport"]
