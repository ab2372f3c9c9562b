"""Credential source interface."""

from typing import Protocol

from akamaipurge.core.entities.credentials import Credentials


class ICredentialSource(Protocol):
    """Contract for retrieving purge credentials per replication agent."""

    def get_credentials(self, agent_id: str) -> Credentials | None:
        """Get the credentials configured for an agent.

        Args:
            agent_id: Identifier of the destination agent.

        Returns:
            The credentials, or None if none are configured.
        """
        ...
