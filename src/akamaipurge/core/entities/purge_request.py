"""Purge request entity and the enumerations that shape it.

The enumeration values are the literal strings of the CCU REST API
wire format, so ``member.value`` can be written into a request body
as-is.
"""

from dataclasses import dataclass
from enum import Enum

from akamaipurge.core.entities.purge_target import PurgeTarget, TargetKind


class PurgeType(Enum):
    """Selects between ARL/URL lists and CP code lists."""

    ARL = "arl"
    CPCODE = "cpcode"

    @property
    def target_kind(self) -> TargetKind:
        """The target kind accepted by this purge type."""
        return TargetKind.URL if self is PurgeType.ARL else TargetKind.CP_CODE


class RemovalKind(Enum):
    """REMOVE evicts cached copies, INVALIDATE marks them stale."""

    REMOVE = "remove"
    INVALIDATE = "invalidate"


class DomainTier(Enum):
    """The CDN purge queue the request is submitted to."""

    STAGING = "staging"
    PRODUCTION = "production"


class PurgeMode(Enum):
    """Dispatch mode.

    TEST: Bare authentication check, sent as GET without a body.
    PURGE: Purge submission, sent as POST with a JSON body.
    """

    TEST = "test"
    PURGE = "purge"


class ReplicationActionType(Enum):
    """Replication action types issued by the host."""

    TEST = "TEST"
    ACTIVATE = "ACTIVATE"
    DEACTIVATE = "DEACTIVATE"
    DELETE = "DELETE"


@dataclass(frozen=True)
class PurgeRequest:
    """Immutable purge request.

    A request with no targets can be constructed but is never sent:
    the dispatcher rejects it before any network I/O.
    """

    targets: tuple[PurgeTarget, ...] = ()
    kind: RemovalKind = RemovalKind.REMOVE
    domain: DomainTier = DomainTier.PRODUCTION

    @property
    def is_empty(self) -> bool:
        """Check whether the request carries no targets."""
        return not self.targets

    @property
    def objects(self) -> list[str]:
        """Target values in request order."""
        return [target.value for target in self.targets]

    @classmethod
    def create(
        cls,
        targets: list[PurgeTarget] | list[str],
        kind: RemovalKind = RemovalKind.REMOVE,
        domain: DomainTier = DomainTier.PRODUCTION,
        target_kind: TargetKind = TargetKind.URL,
    ) -> "PurgeRequest":
        """Factory method accepting targets or plain strings.

        Args:
            targets: Purge targets, or raw values to wrap.
            kind: Removal kind.
            domain: Domain tier.
            target_kind: Kind used to wrap raw string values.

        Returns:
            A new PurgeRequest instance.
        """
        wrapped = tuple(
            t if isinstance(t, PurgeTarget) else PurgeTarget(value=t, kind=target_kind)
            for t in targets
        )
        return cls(targets=wrapped, kind=kind, domain=domain)
