"""Payload serializer implementations."""

from akamaipurge.infrastructure.serializers.json import JsonPayloadSerializer

__all__ = ["JsonPayloadSerializer"]
