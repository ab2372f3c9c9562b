"""Infrastructure layer implementations for akamaipurge."""

from akamaipurge.infrastructure.credentials import StaticCredentialSource
from akamaipurge.infrastructure.externalizers import StaticExternalizer
from akamaipurge.infrastructure.repositories import InMemoryContentRepository
from akamaipurge.infrastructure.serializers import JsonPayloadSerializer
from akamaipurge.infrastructure.transports import HttpxTransport

__all__ = [
    "HttpxTransport",
    "JsonPayloadSerializer",
    "StaticExternalizer",
    "InMemoryContentRepository",
    "StaticCredentialSource",
]
