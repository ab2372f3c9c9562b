"""Externalizer interface."""

from typing import Protocol


class IExternalizer(Protocol):
    """Contract for mapping internal paths to external URLs.

    The host owns the externalization scheme (domain mappings, vanity
    rules, resource resolver mappings). Implementations raise
    ExternalizationError when a path cannot be mapped.
    """

    def external_link(self, environment: str, path: str) -> str:
        """Build the external URL of a path for a named environment.

        Args:
            environment: Environment tier name, e.g. ``"production"``.
            path: Internal repository path.

        Returns:
            The absolute external URL, without a selector or extension.
        """
        ...
