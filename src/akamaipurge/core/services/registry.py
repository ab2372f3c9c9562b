"""Explicit registry of content builders and transport handlers."""

from akamaipurge.core.services.content_builder import PurgeContentBuilder
from akamaipurge.core.services.transport_handler import AkamaiTransportHandler


class HandlerRegistry:
    """Maps builder names and transport schemes to their handlers.

    The owning application populates the registry at startup; agents
    then look up their builder by name and their transport handler by
    transport URI.
    """

    def __init__(self) -> None:
        self._builders: dict[str, PurgeContentBuilder] = {}
        self._transports: dict[str, AkamaiTransportHandler] = {}

    def register_builder(self, builder: PurgeContentBuilder, name: str | None = None) -> None:
        """Register a content builder under its name."""
        self._builders[name or builder.name] = builder

    def register_transport(self, handler: AkamaiTransportHandler, scheme: str | None = None) -> None:
        """Register a transport handler for a URI scheme such as ``akamai://``."""
        key = (scheme or handler.PROTOCOL).lower()
        self._transports[key] = handler

    def builder(self, name: str) -> PurgeContentBuilder:
        """Get a content builder by name.

        Raises:
            KeyError: If no builder is registered under the name.
        """
        try:
            return self._builders[name]
        except KeyError:
            known = ", ".join(sorted(self._builders)) or "none"
            raise KeyError(f"No content builder named {name!r} (registered: {known})") from None

    def transport_for(self, transport_uri: str | None) -> AkamaiTransportHandler | None:
        """Find the handler responsible for a transport URI.

        Returns:
            The first registered handler that can handle the URI, or None.
        """
        if transport_uri is None:
            return None
        uri = transport_uri.lower()
        for scheme, handler in self._transports.items():
            if uri.startswith(scheme) and handler.can_handle(transport_uri):
                return handler
        return None

    def __len__(self) -> int:
        return len(self._builders) + len(self._transports)
