"""Transport handler - delivers replication actions to the purge API."""

import logging

from akamaipurge.core.entities.agent_config import AgentConfig
from akamaipurge.core.entities.credentials import Credentials
from akamaipurge.core.entities.purge_outcome import PurgeOutcome, Rejected
from akamaipurge.core.entities.purge_request import (
    PurgeMode,
    PurgeRequest,
    PurgeType,
    ReplicationActionType,
)
from akamaipurge.core.entities.purge_target import PurgeTarget
from akamaipurge.core.exceptions import (
    SerializationError,
    UnsupportedOperationError,
)
from akamaipurge.core.interfaces.purge_transport import IPurgeTransport
from akamaipurge.core.interfaces.serializer import IPayloadSerializer
from akamaipurge.core.services.purge_dispatcher import PurgeDispatcher

logger = logging.getLogger(__name__)

_MODES = {
    ReplicationActionType.TEST: PurgeMode.TEST,
    ReplicationActionType.ACTIVATE: PurgeMode.PURGE,
}


def mode_for_action(action_type: ReplicationActionType) -> PurgeMode:
    """Map a replication action type to a dispatch mode.

    Raises:
        UnsupportedOperationError: For anything but TEST and ACTIVATE.
    """
    try:
        return _MODES[action_type]
    except KeyError:
        raise UnsupportedOperationError(
            f"Replication action type {action_type.value} not supported."
        ) from None


class AkamaiTransportHandler:
    """Transport handler for agents whose transport URI uses ``akamai://``.

    TEST actions become a GET authentication check and ACTIVATE
    actions a purge POST. The purge objects come from the content
    builder payload for ARL agents and from the configured CP codes
    for CP code agents.
    """

    PROTOCOL = "akamai://"

    def __init__(
        self,
        dispatcher: PurgeDispatcher,
        serializer: IPayloadSerializer,
        config: AgentConfig | None = None,
    ) -> None:
        """Initialize the transport handler.

        Args:
            dispatcher: Dispatcher used to reach the purge API.
            serializer: Serializer for the content builder payload.
            config: Agent settings. Uses defaults if not provided.
        """
        self._dispatcher = dispatcher
        self._serializer = serializer
        self._config = config or AgentConfig()

    @classmethod
    def from_config(
        cls,
        config: AgentConfig,
        transport: IPurgeTransport,
        serializer: IPayloadSerializer,
    ) -> "AkamaiTransportHandler":
        """Create a handler whose dispatcher follows the agent settings."""
        return cls(
            dispatcher=PurgeDispatcher(transport=transport, config=config.dispatcher),
            serializer=serializer,
            config=config,
        )

    @property
    def config(self) -> AgentConfig:
        """Get the agent configuration."""
        return self._config

    def can_handle(self, transport_uri: str | None) -> bool:
        """Check if an agent's transport URI selects this handler."""
        if transport_uri is None:
            return False
        return transport_uri.lower().startswith(self.PROTOCOL)

    async def deliver(
        self,
        action_type: ReplicationActionType,
        content: bytes | None,
        credentials: Credentials,
    ) -> PurgeOutcome:
        """Deliver a replication action.

        Args:
            action_type: The replication action issued by the host.
            content: Payload produced by the content builder, if any.
            credentials: Purge API credentials of the agent.

        Returns:
            The classified outcome. Unsupported actions are rejected
            without any network call.
        """
        try:
            mode = mode_for_action(action_type)
        except UnsupportedOperationError as e:
            logger.warning("%s", e)
            return Rejected.unsupported(str(e))

        if mode is PurgeMode.TEST:
            return await self._dispatcher.dispatch(None, credentials, PurgeMode.TEST)

        try:
            targets = self._targets(content)
        except SerializationError as e:
            logger.warning("Could not retrieve content from content builder: %s", e)
            return Rejected.validation(f"Could not retrieve content from content builder: {e}")

        if not targets:
            logger.warning("No CP codes or pages to purge")

        request = PurgeRequest(
            targets=tuple(targets),
            kind=self._config.action,
            domain=self._config.domain,
        )
        return await self._dispatcher.dispatch(request, credentials, PurgeMode.PURGE)

    def _targets(self, content: bytes | None) -> list[PurgeTarget]:
        if self._config.purge_type is PurgeType.CPCODE:
            return [PurgeTarget.cp_code(code) for code in self._config.cp_codes]

        if content is None or not content.strip():
            return []
        return [PurgeTarget.url(value) for value in self._serializer.deserialize(content)]
