"""URL resolver - maps a content change to the URLs that must be purged."""

import logging

from akamaipurge.core.entities.content_change import ContentChange
from akamaipurge.core.entities.purge_target import PurgeTarget
from akamaipurge.core.exceptions import ExternalizationError
from akamaipurge.core.interfaces.externalizer import IExternalizer
from akamaipurge.core.interfaces.reference_finder import IReferenceFinder

logger = logging.getLogger(__name__)


class UrlResolver:
    """Derives the externally reachable URLs affected by a content change.

    Pages are externalized through the injected externalizer and get
    the ``.html`` suffix; their vanity URL, when set, follows the
    primary URL. Anything that is not a page falls back to its raw
    internal path. The resolver keeps no state between calls.
    """

    def __init__(
        self,
        externalizer: IExternalizer | None = None,
        reference_finder: IReferenceFinder | None = None,
        environment: str = "production",
        suffix: str = ".html",
    ) -> None:
        """Initialize the resolver.

        Args:
            externalizer: Path to external URL mapping. When None, every
                change resolves to its raw path.
            reference_finder: Optional hook returning URLs of pages that
                embed the changed resource.
            environment: Environment tier passed to the externalizer.
            suffix: Extension appended to externalized page links.
        """
        self._externalizer = externalizer
        self._reference_finder = reference_finder
        self._environment = environment
        self._suffix = suffix

    def resolve(self, change: ContentChange) -> list[PurgeTarget]:
        """Resolve a content change to ordered purge targets.

        Args:
            change: The changed content.

        Returns:
            The primary URL first, then the vanity URL if any, then the
            URLs of referencing pages. ``[path]`` for non-pages or when
            externalization is unavailable.
        """
        if not change.is_page:
            logger.info("Resource path added: %s", change.path)
            return [PurgeTarget.url(change.path)]

        link = self._external_link(change.path)
        if link is None:
            logger.info("Resource path added: %s", change.path)
            return [PurgeTarget.url(change.path)]

        values = [link]
        logger.info("Page link added: %s", link)

        vanity_url = change.vanity_url
        if vanity_url and change.has_vanity_url:
            values.append(vanity_url)
            logger.info("Vanity URL added: %s", vanity_url)

        for url in self._referencing_urls(change.path):
            if url not in values:
                values.append(url)
                logger.info("Referencing page added: %s", url)

        return [PurgeTarget.url(value) for value in values]

    def _external_link(self, path: str) -> str | None:
        if self._externalizer is None:
            logger.warning("No externalizer available, using raw path for %s", path)
            return None
        try:
            return self._externalizer.external_link(self._environment, path) + self._suffix
        except ExternalizationError as e:
            logger.warning("Could not externalize %s, using raw path: %s", path, e)
            return None

    def _referencing_urls(self, path: str) -> list[str]:
        if self._reference_finder is None:
            return []
        return [url for url in self._reference_finder.find_referencing_urls(path) if url]
