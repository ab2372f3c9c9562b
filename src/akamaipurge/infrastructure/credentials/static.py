"""Static credential source implementation."""

from akamaipurge.core.entities.credentials import Credentials


class StaticCredentialSource:
    """Credential source backed by a fixed agent id to credentials table."""

    def __init__(self, credentials: dict[str, Credentials] | None = None) -> None:
        self._credentials = dict(credentials or {})

    def set_credentials(self, agent_id: str, credentials: Credentials) -> None:
        self._credentials[agent_id] = credentials

    def get_credentials(self, agent_id: str) -> Credentials | None:
        return self._credentials.get(agent_id)
