"""Reference finder interface."""

from typing import Protocol


class IReferenceFinder(Protocol):
    """Contract for discovering pages that embed a changed resource.

    Which pages include a resource is project specific, so no default
    implementation ships with the library.
    """

    def find_referencing_urls(self, path: str) -> list[str]:
        """Find external URLs of pages that include a resource.

        Args:
            path: Internal path of the changed resource.

        Returns:
            External URLs to purge alongside the resource itself.
        """
        ...
