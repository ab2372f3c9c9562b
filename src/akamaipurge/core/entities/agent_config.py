"""Dispatcher and replication agent configuration."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from akamaipurge.core.entities.purge_request import (
    DomainTier,
    PurgeType,
    RemovalKind,
)
from akamaipurge.core.exceptions import ConfigurationError

CCU_REST_API_URL = "https://api.ccu.akamai.com/ccu/v2/queues/default"

# Host agent property names
PROPERTY_TYPE = "akamaiType"
PROPERTY_CP_CODES = "akamaiCPCodes"
PROPERTY_DOMAIN = "akamaiDomain"
PROPERTY_ACTION = "akamaiAction"


@dataclass
class DispatcherConfig:
    """Purge dispatcher configuration.

    The timeouts bound the single round-trip made per dispatch. The
    host enforces its own queue-level timeout on top of this.
    """

    endpoint: str = CCU_REST_API_URL
    purge_type: PurgeType = PurgeType.ARL
    connect_timeout: float = 10.0
    read_timeout: float = 30.0
    charset: str = "iso-8859-1"

    def __post_init__(self) -> None:
        """Validate timeouts and endpoint."""
        if not self.endpoint:
            raise ConfigurationError("endpoint must not be empty")
        if self.connect_timeout <= 0 or self.read_timeout <= 0:
            raise ConfigurationError("timeouts must be positive")


@dataclass
class AgentConfig:
    """Replication agent settings consumed by the transport handler.

    Mirrors the properties an operator sets on the host's agent
    dialog. ``cp_codes`` is only used when ``purge_type`` is CPCODE.
    """

    purge_type: PurgeType = PurgeType.ARL
    cp_codes: tuple[str, ...] = ()
    domain: DomainTier = DomainTier.PRODUCTION
    action: RemovalKind = RemovalKind.REMOVE
    dispatcher: DispatcherConfig = field(default_factory=DispatcherConfig)

    def __post_init__(self) -> None:
        """Keep the dispatcher's purge type in line with the agent's."""
        self.cp_codes = tuple(self.cp_codes)
        self.dispatcher = replace(self.dispatcher, purge_type=self.purge_type)

    @classmethod
    def from_properties(
        cls,
        properties: Mapping[str, Any],
        dispatcher: DispatcherConfig | None = None,
    ) -> "AgentConfig":
        """Build a config from host agent properties.

        Missing or blank values fall back to the defaults (arl,
        production, remove).

        Args:
            properties: Agent property map.
            dispatcher: Optional dispatcher settings.

        Returns:
            A new AgentConfig instance.

        Raises:
            ConfigurationError: If an enumerated property has an unknown value.
        """
        return cls(
            purge_type=_enum_property(properties, PROPERTY_TYPE, PurgeType, PurgeType.ARL),
            cp_codes=_list_property(properties, PROPERTY_CP_CODES),
            domain=_enum_property(
                properties, PROPERTY_DOMAIN, DomainTier, DomainTier.PRODUCTION
            ),
            action=_enum_property(
                properties, PROPERTY_ACTION, RemovalKind, RemovalKind.REMOVE
            ),
            dispatcher=dispatcher or DispatcherConfig(),
        )


def _enum_property(properties: Mapping[str, Any], name: str, enum_cls: Any, default: Any) -> Any:
    raw = properties.get(name)
    if raw is None or not str(raw).strip():
        return default
    try:
        return enum_cls(str(raw).strip().lower())
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ConfigurationError(
            f"Invalid value {raw!r} for {name}; expected one of: {allowed}"
        ) from e


def _list_property(properties: Mapping[str, Any], name: str) -> tuple[str, ...]:
    raw = properties.get(name)
    if raw is None:
        return ()
    if isinstance(raw, str):
        raw = [raw]
    return tuple(str(value).strip() for value in raw if str(value).strip())
