"""Domain entities for akamaipurge."""

from akamaipurge.core.entities.agent_config import (
    CCU_REST_API_URL,
    AgentConfig,
    DispatcherConfig,
)
from akamaipurge.core.entities.content_change import ContentChange, Page
from akamaipurge.core.entities.credentials import Credentials
from akamaipurge.core.entities.purge_outcome import (
    PurgeOutcome,
    Rejected,
    RejectionKind,
    Success,
    TransportFailure,
)
from akamaipurge.core.entities.purge_request import (
    DomainTier,
    PurgeMode,
    PurgeRequest,
    PurgeType,
    RemovalKind,
    ReplicationActionType,
)
from akamaipurge.core.entities.purge_target import PurgeTarget, TargetKind

__all__ = [
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
]
