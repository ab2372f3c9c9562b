"""In-memory content repository implementation."""

from akamaipurge.core.entities.content_change import Page


class InMemoryContentRepository:
    """Content repository holding pages in a dict keyed by path.

    Suitable for tests and for hosts that push their page index in
    ahead of a replication run.
    """

    def __init__(self, pages: list[Page] | None = None) -> None:
        self._pages: dict[str, Page] = {page.path: page for page in pages or []}

    def add_page(self, path: str, vanity_url: str | None = None) -> Page:
        """Store a page and return it."""
        page = Page(path=path, vanity_url=vanity_url)
        self._pages[path] = page
        return page

    def get_page(self, path: str) -> Page | None:
        """Get the page stored at a path, or None for non-pages."""
        return self._pages.get(path)

    def __len__(self) -> int:
        return len(self._pages)
