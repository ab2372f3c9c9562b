"""Core domain layer for akamaipurge."""

from akamaipurge.core.entities import (
    AgentConfig,
    ContentChange,
    Credentials,
    DispatcherConfig,
    PurgeOutcome,
    PurgeRequest,
    PurgeTarget,
)
from akamaipurge.core.interfaces import (
    IContentRepository,
    ICredentialSource,
    IExternalizer,
    IPayloadSerializer,
    IPurgeTransport,
    IReferenceFinder,
)
from akamaipurge.core.services import PurgeDispatcher, UrlResolver

__all__ = [
    # Entities
    "ContentChange",
    "Credentials",
    "PurgeTarget",
    "PurgeRequest",
    "PurgeOutcome",
    "AgentConfig",
    "DispatcherConfig",
    # Interfaces
    "IExternalizer",
    "IContentRepository",
    "ICredentialSource",
    "IReferenceFinder",
    "IPayloadSerializer",
    "IPurgeTransport",
    # Services
    "UrlResolver",
    "PurgeDispatcher",
]
