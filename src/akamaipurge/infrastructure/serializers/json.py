"""JSON payload serializer implementation."""

import json
from typing import Any

from akamaipurge.core.exceptions import SerializationError


class JsonPayloadSerializer:
    """JSON serializer for the purge object list.

    Writes the list as a JSON array and reads it back, checking that
    every element is a string.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the JSON serializer.

        Args:
            encoding: Character encoding to use.
        """
        self._encoding = encoding

    def serialize(self, objects: list[str]) -> bytes:
        """Serialize purge object values to bytes.

        Args:
            objects: URLs, ARLs or CP codes.

        Returns:
            The JSON array as bytes.

        Raises:
            SerializationError: If the values cannot be serialized.
        """
        try:
            json_str = json.dumps(list(objects), ensure_ascii=False)
            return json_str.encode(self._encoding)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize purge objects: {e}") from e

    def deserialize(self, data: bytes) -> list[str]:
        """Deserialize bytes to purge object values.

        Args:
            data: A JSON array of strings.

        Returns:
            The purge object values in order.

        Raises:
            SerializationError: If the data is not a JSON array of strings.
        """
        try:
            value: Any = json.loads(data.decode(self._encoding))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SerializationError(f"Failed to deserialize purge objects: {e}") from e

        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise SerializationError("Purge objects must be a JSON array of strings")
        return value
