"""Content repository interface."""

from typing import Protocol

from akamaipurge.core.entities.content_change import Page


class IContentRepository(Protocol):
    """Contract for looking up pages in the host's content repository."""

    def get_page(self, path: str) -> Page | None:
        """Get the page stored at a path.

        Args:
            path: Internal repository path.

        Returns:
            The page, or None if the path is not a page.

        Raises:
            RepositoryUnavailableError: If the repository cannot be reached.
        """
        ...
