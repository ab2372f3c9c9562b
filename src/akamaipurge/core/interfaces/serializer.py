"""Payload serializer interface."""

from typing import Protocol


class IPayloadSerializer(Protocol):
    """Contract for encoding the purge object list handed from the
    content builder to the transport handler.
    """

    def serialize(self, objects: list[str]) -> bytes:
        """Serialize purge object values to bytes.

        Raises:
            SerializationError: If the values cannot be serialized.
        """
        ...

    def deserialize(self, data: bytes) -> list[str]:
        """Deserialize bytes to purge object values.

        Raises:
            SerializationError: If the data is not a list of strings.
        """
        ...
