"""Content builder - turns an activated path into a purge payload."""

import logging

from akamaipurge.core.entities.content_change import ContentChange
from akamaipurge.core.exceptions import RepositoryUnavailableError
from akamaipurge.core.interfaces.content_repository import IContentRepository
from akamaipurge.core.interfaces.serializer import IPayloadSerializer
from akamaipurge.core.services.url_resolver import UrlResolver

logger = logging.getLogger(__name__)


class PurgeContentBuilder:
    """Builds the replication content for a purge agent.

    The content is the serialized list of public URLs for the
    activated path, as computed by the URL resolver. The transport
    handler reads it back as the purge object list when the agent
    purges by ARL.
    """

    NAME = "akamai"
    TITLE = "Akamai Purge Agent"

    def __init__(self, resolver: UrlResolver, serializer: IPayloadSerializer) -> None:
        """Initialize the content builder.

        Args:
            resolver: URL resolver for the activated path.
            serializer: Serializer for the purge object list.
        """
        self._resolver = resolver
        self._serializer = serializer

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def title(self) -> str:
        return self.TITLE

    def create(self, path: str | None, repository: IContentRepository | None) -> bytes | None:
        """Create the purge payload for an activated path.

        Args:
            path: The activated repository path.
            repository: Content repository used to look the path up.

        Returns:
            The serialized purge objects, or None when there is nothing
            to build (blank path or unreachable repository).
        """
        if not path or not path.strip():
            return None

        if repository is None:
            logger.error("Could not build purge content for %s: no content repository", path)
            return None

        try:
            page = repository.get_page(path)
        except RepositoryUnavailableError as e:
            logger.error("Could not build purge content for %s: %s", path, e)
            return None

        change = ContentChange.for_page(page) if page is not None else ContentChange(path=path)

        targets = self._resolver.resolve(change)
        return self._serializer.serialize([target.value for target in targets])
