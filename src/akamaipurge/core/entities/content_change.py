"""Content change and repository page entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Page:
    """A page record as reported by the content repository."""

    path: str
    vanity_url: str | None = None


@dataclass(frozen=True)
class ContentChange:
    """A changed repository path handed to the URL resolver.

    Attributes:
        path: Internal repository path, e.g. ``/content/site/en/about``.
        is_page: Whether the path resolves to a page.
        vanity_url: Optional alternate URL of the page. Blank means absent.
    """

    path: str
    is_page: bool = False
    vanity_url: str | None = None

    @property
    def has_vanity_url(self) -> bool:
        """Check if a non-blank vanity URL is set."""
        return bool(self.vanity_url and self.vanity_url.strip())

    @classmethod
    def for_page(cls, page: Page) -> "ContentChange":
        """Create a change for an existing page."""
        return cls(path=page.path, is_page=True, vanity_url=page.vanity_url)
