"""Purge target value object."""

from dataclasses import dataclass
from enum import Enum


class TargetKind(Enum):
    """What a purge target identifies.

    URL: A fully qualified URL or ARL of a cached object.
    CP_CODE: A content provider code naming a logical content group.
    """

    URL = "url"
    CP_CODE = "cpcode"


@dataclass(frozen=True)
class PurgeTarget:
    """Immutable purge target.

    A tagged union of a URL/ARL or a CP code. The URL resolver always
    emits URL targets; operator configuration may supply CP codes.
    """

    value: str
    kind: TargetKind = TargetKind.URL

    def __str__(self) -> str:
        return self.value

    @classmethod
    def url(cls, value: str) -> "PurgeTarget":
        """Create a URL/ARL target."""
        return cls(value=value, kind=TargetKind.URL)

    @classmethod
    def cp_code(cls, value: str) -> "PurgeTarget":
        """Create a CP code target."""
        return cls(value=value, kind=TargetKind.CP_CODE)
