"""Purge agent - runs one replication action end to end."""

import logging

from akamaipurge.core.entities.purge_outcome import PurgeOutcome, Rejected
from akamaipurge.core.entities.purge_request import ReplicationActionType
from akamaipurge.core.interfaces.content_repository import IContentRepository
from akamaipurge.core.interfaces.credential_source import ICredentialSource
from akamaipurge.core.services.content_builder import PurgeContentBuilder
from akamaipurge.core.services.transport_handler import AkamaiTransportHandler

logger = logging.getLogger(__name__)


class PurgeAgent:
    """Composes content building and delivery for a single agent.

    This is the sequence the host's replication engine runs for each
    queued action: build the purge payload for the path, look up the
    agent's credentials and hand both to the transport handler. Retry
    and scheduling remain with the caller.
    """

    def __init__(
        self,
        agent_id: str,
        transport_uri: str,
        content_builder: PurgeContentBuilder,
        transport_handler: AkamaiTransportHandler,
        credential_source: ICredentialSource,
        repository: IContentRepository | None = None,
    ) -> None:
        """Initialize the agent.

        Args:
            agent_id: Identifier used for credential lookup.
            transport_uri: The agent's transport URI, e.g. ``akamai://purge``.
            content_builder: Builder for the purge payload.
            transport_handler: Handler delivering to the purge API.
            credential_source: Source of the agent's credentials.
            repository: Content repository for page lookups.
        """
        self.agent_id = agent_id
        self.transport_uri = transport_uri
        self._content_builder = content_builder
        self._transport_handler = transport_handler
        self._credential_source = credential_source
        self._repository = repository

    async def replicate(
        self,
        action_type: ReplicationActionType,
        path: str | None = None,
    ) -> PurgeOutcome:
        """Run one replication action for a path.

        Args:
            action_type: The replication action.
            path: Activated repository path. Not needed for TEST.

        Returns:
            The classified outcome of the delivery.
        """
        if not self._transport_handler.can_handle(self.transport_uri):
            return self._reject(f"Transport URI {self.transport_uri!r} is not handled")

        credentials = self._credential_source.get_credentials(self.agent_id)
        if credentials is None:
            return self._reject(f"No credentials configured for agent {self.agent_id!r}")

        content = None
        if action_type is ReplicationActionType.ACTIVATE:
            content = self._content_builder.create(path, self._repository)

        outcome = await self._transport_handler.deliver(action_type, content, credentials)
        logger.info(
            "Agent %s %s %s: %s",
            self.agent_id,
            action_type.value,
            path or "-",
            "ok" if outcome.ok else outcome.reason,
        )
        return outcome

    def _reject(self, reason: str) -> Rejected:
        logger.warning("Agent %s: %s", self.agent_id, reason)
        return Rejected.validation(reason)
