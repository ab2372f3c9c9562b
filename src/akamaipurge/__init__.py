"""akamaipurge - Akamai CCU cache purging for content replication.

A Python library that turns activated content paths into the public
URLs they are served under and submits purge requests for them to the
Akamai CCU REST API. It plugs into a content-management host's
replication engine through two extension points, a content builder
and a transport handler; queueing, scheduling and retry stay with the
host.

Example:
    from akamaipurge import (
        AgentConfig,
        AkamaiTransportHandler,
        Credentials,
        HttpxTransport,
        InMemoryContentRepository,
        JsonPayloadSerializer,
        PurgeContentBuilder,
        ReplicationActionType,
        StaticExternalizer,
        UrlResolver,
    )

    config = AgentConfig.from_properties({
        "akamaiType": "arl",
        "akamaiDomain": "staging",
        "akamaiAction": "invalidate",
    })
    serializer = JsonPayloadSerializer()

    resolver = UrlResolver(
        externalizer=StaticExternalizer(
            {"production": "https://www.my-site.com"},
            content_root="/content/my-site",
        ),
    )
    builder = PurgeContentBuilder(resolver, serializer)
    handler = AkamaiTransportHandler.from_config(
        config,
        transport=HttpxTransport.from_config(config.dispatcher),
        serializer=serializer,
    )

    repository = InMemoryContentRepository()
    repository.add_page("/content/my-site/en/about", vanity_url="/about-us")

    content = builder.create("/content/my-site/en/about", repository)
    outcome = await handler.deliver(
        ReplicationActionType.ACTIVATE,
        content,
        Credentials(username="user", secret="secret"),
    )
    if not outcome.ok and outcome.retryable:
        ...  # hand back to the replication queue
"""

from akamaipurge.core.entities import (
    CCU_REST_API_URL,
    AgentConfig,
    ContentChange,
    Credentials,
    DispatcherConfig,
    DomainTier,
    Page,
    PurgeMode,
    PurgeOutcome,
    PurgeRequest,
    PurgeTarget,
    PurgeType,
    Rejected,
    RejectionKind,
    RemovalKind,
    ReplicationActionType,
    Success,
    TargetKind,
    TransportFailure,
)
from akamaipurge.core.exceptions import (
    ConfigurationError,
    ExternalizationError,
    PurgeError,
    RepositoryUnavailableError,
    SerializationError,
    TransportError,
    UnsupportedOperationError,
    ValidationError,
)
from akamaipurge.core.interfaces import (
    IContentRepository,
    ICredentialSource,
    IExternalizer,
    IPayloadSerializer,
    IPurgeTransport,
    IReferenceFinder,
    TransportResponse,
)
from akamaipurge.core.services import (
    AkamaiTransportHandler,
    HandlerRegistry,
    PurgeAgent,
    PurgeContentBuilder,
    PurgeDispatcher,
    UrlResolver,
    basic_auth_header,
    build_purge_body,
    encode_purge_body,
)
from akamaipurge.infrastructure import (
    HttpxTransport,
    InMemoryContentRepository,
    JsonPayloadSerializer,
    StaticCredentialSource,
    StaticExternalizer,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "ContentChange",
    "Page",
    "Credentials",
    "PurgeTarget",
    "TargetKind",
    "PurgeRequest",
    "PurgeType",
    "RemovalKind",
    "DomainTier",
    "PurgeMode",
    "ReplicationActionType",
    # Outcomes
    "PurgeOutcome",
    "Success",
    "Rejected",
    "RejectionKind",
    "TransportFailure",
    # Configuration
    "AgentConfig",
    "DispatcherConfig",
    "CCU_REST_API_URL",
    # Errors
    "PurgeError",
    "ValidationError",
    "ConfigurationError",
    "UnsupportedOperationError",
    "TransportError",
    "ExternalizationError",
    "RepositoryUnavailableError",
    "SerializationError",
    # Core interfaces
    "IExternalizer",
    "IContentRepository",
    "ICredentialSource",
    "IReferenceFinder",
    "IPayloadSerializer",
    "IPurgeTransport",
    "TransportResponse",
    # Core services
    "UrlResolver",
    "PurgeDispatcher",
    "basic_auth_header",
    "build_purge_body",
    "encode_purge_body",
    # Host extension points
    "PurgeContentBuilder",
    "AkamaiTransportHandler",
    "HandlerRegistry",
    "PurgeAgent",
    # Infrastructure implementations
    "HttpxTransport",
    "JsonPayloadSerializer",
    "StaticExternalizer",
    "InMemoryContentRepository",
    "StaticCredentialSource",
]
