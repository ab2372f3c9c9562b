"""Purge outcome variants.

A dispatch always ends in exactly one of ``Success``, ``Rejected`` or
``TransportFailure``. The outcome carries enough detail for the caller
to decide whether the attempt should be retried; the library itself
never retries.
"""

from dataclasses import dataclass
from enum import Enum


class RejectionKind(Enum):
    """Why a purge was rejected.

    VALIDATION: A precondition failed before any network I/O.
    UNSUPPORTED: The replication action is not handled.
    HTTP_STATUS: The purge API answered with a non-success status.
    """

    VALIDATION = "validation"
    UNSUPPORTED = "unsupported"
    HTTP_STATUS = "http_status"


@dataclass(frozen=True)
class Success:
    """The purge API accepted the request."""

    status_code: int
    body: str = ""

    @property
    def ok(self) -> bool:
        return True

    @property
    def retryable(self) -> bool:
        return False


@dataclass(frozen=True)
class Rejected:
    """The request was refused, locally or by the purge API.

    For HTTP rejections the status code and body are reported
    verbatim. Whether those are worth retrying is the caller's policy,
    so ``retryable`` is ``None`` for them.
    """

    reason: str
    kind: RejectionKind = RejectionKind.HTTP_STATUS
    status_code: int | None = None
    body: str = ""

    @property
    def ok(self) -> bool:
        return False

    @property
    def retryable(self) -> bool | None:
        """Retry hint: False for local rejections, None for HTTP ones."""
        if self.kind is RejectionKind.HTTP_STATUS:
            return None
        return False

    @property
    def is_server_error(self) -> bool:
        """Check if the purge API answered with a 5xx status."""
        return self.status_code is not None and 500 <= self.status_code < 600

    @classmethod
    def validation(cls, reason: str) -> "Rejected":
        """Create a rejection for a failed precondition."""
        return cls(reason=reason, kind=RejectionKind.VALIDATION)

    @classmethod
    def unsupported(cls, reason: str) -> "Rejected":
        """Create a rejection for an unsupported operation."""
        return cls(reason=reason, kind=RejectionKind.UNSUPPORTED)

    @classmethod
    def from_status(cls, status_code: int, body: str) -> "Rejected":
        """Create a rejection from a non-success HTTP response."""
        return cls(
            reason=f"HTTP {status_code}: {body}",
            kind=RejectionKind.HTTP_STATUS,
            status_code=status_code,
            body=body,
        )


@dataclass(frozen=True)
class TransportFailure:
    """The request could not be sent or its response could not be read.

    Always retryable.
    """

    cause: BaseException

    @property
    def ok(self) -> bool:
        return False

    @property
    def retryable(self) -> bool:
        return True

    @property
    def reason(self) -> str:
        return f"{type(self.cause).__name__}: {self.cause}"


PurgeOutcome = Success | Rejected | TransportFailure
