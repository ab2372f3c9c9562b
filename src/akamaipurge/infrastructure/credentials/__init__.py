"""Credential source implementations."""

from akamaipurge.infrastructure.credentials.static import StaticCredentialSource

__all__ = ["StaticCredentialSource"]
