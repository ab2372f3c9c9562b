"""Credentials value object."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """Purge API credentials.

    Immutable and safe to share across concurrent dispatches. The
    secret is excluded from ``repr`` so it never reaches log output.
    """

    username: str
    secret: str = field(repr=False)
