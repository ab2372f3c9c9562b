"""Domain services for akamaipurge."""

from akamaipurge.core.services.content_builder import PurgeContentBuilder
from akamaipurge.core.services.purge_agent import PurgeAgent
from akamaipurge.core.services.purge_dispatcher import (
    PurgeDispatcher,
    basic_auth_header,
    build_purge_body,
    encode_purge_body,
)
from akamaipurge.core.services.registry import HandlerRegistry
from akamaipurge.core.services.transport_handler import (
    AkamaiTransportHandler,
    mode_for_action,
)
from akamaipurge.core.services.url_resolver import UrlResolver

__all__ = [
    "UrlResolver",
    "PurgeDispatcher",
    "basic_auth_header",
    "build_purge_body",
    "encode_purge_body",
    # Host extension points
    "PurgeContentBuilder",
    "AkamaiTransportHandler",
    "mode_for_action",
    "HandlerRegistry",
    "PurgeAgent",
]
