"""Core interfaces (Protocol classes) for akamaipurge."""

from akamaipurge.core.interfaces.content_repository import IContentRepository
from akamaipurge.core.interfaces.credential_source import ICredentialSource
from akamaipurge.core.interfaces.externalizer import IExternalizer
from akamaipurge.core.interfaces.purge_transport import IPurgeTransport, TransportResponse
from akamaipurge.core.interfaces.reference_finder import IReferenceFinder
from akamaipurge.core.interfaces.serializer import IPayloadSerializer

__all__ = [
    "IExternalizer",
    "IContentRepository",
    "ICredentialSource",
    "IReferenceFinder",
    "IPayloadSerializer",
    "IPurgeTransport",
    "TransportResponse",
]
