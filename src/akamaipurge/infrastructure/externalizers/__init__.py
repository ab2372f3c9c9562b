"""Externalizer implementations."""

from akamaipurge.infrastructure.externalizers.static import StaticExternalizer

__all__ = ["StaticExternalizer"]
