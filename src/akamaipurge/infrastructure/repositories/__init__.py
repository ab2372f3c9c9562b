"""Content repository implementations."""

from akamaipurge.infrastructure.repositories.memory import InMemoryContentRepository

__all__ = ["InMemoryContentRepository"]
