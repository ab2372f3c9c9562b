"""Static externalizer implementation."""

from akamaipurge.core.exceptions import ExternalizationError


class StaticExternalizer:
    """Externalizer backed by a fixed environment to base URL table.

    Optionally strips a content root, so with the root
    ``/content/my-site`` the path ``/content/my-site/foo/bar`` maps to
    ``https://www.my-site.com/foo/bar`` in production.
    """

    def __init__(self, base_urls: dict[str, str], content_root: str | None = None) -> None:
        """Initialize the externalizer.

        Args:
            base_urls: Base URL per environment tier name.
            content_root: Optional path prefix removed before mapping.
        """
        self._base_urls = {name: url.rstrip("/") for name, url in base_urls.items()}
        self._content_root = content_root.rstrip("/") if content_root else None

    def external_link(self, environment: str, path: str) -> str:
        """Build the external URL of a path.

        Raises:
            ExternalizationError: If the environment has no base URL.
        """
        base_url = self._base_urls.get(environment)
        if base_url is None:
            raise ExternalizationError(f"No base URL configured for environment {environment!r}")

        if self._content_root and (
            path == self._content_root or path.startswith(self._content_root + "/")
        ):
            path = path[len(self._content_root):]

        if not path.startswith("/"):
            path = "/" + path
        return base_url + path
