"""Purge dispatcher - builds, sends and classifies one purge API request.

Each dispatch moves through Built, Authenticated, Sent and Classified.
Failures at any step end the call with a classified outcome rather
than an exception. The dispatcher keeps no state between calls and
never retries.
"""

import base64
import json
import logging
from typing import Any

from akamaipurge.core.entities.agent_config import DispatcherConfig
from akamaipurge.core.entities.credentials import Credentials
from akamaipurge.core.entities.purge_outcome import (
    PurgeOutcome,
    Rejected,
    Success,
    TransportFailure,
)
from akamaipurge.core.entities.purge_request import PurgeMode, PurgeRequest, PurgeType
from akamaipurge.core.exceptions import TransportError, ValidationError
from akamaipurge.core.interfaces.purge_transport import IPurgeTransport

logger = logging.getLogger(__name__)

# Expected status per mode
SUCCESS_STATUS = {
    PurgeMode.TEST: 200,
    PurgeMode.PURGE: 201,
}

CONTENT_TYPE_JSON = "application/json"


def basic_auth_header(credentials: Credentials) -> str:
    """Build a preemptive HTTP Basic Authorization header value.

    The purge API never answers with a 401 challenge, so credentials
    have to travel with the first request.

    Args:
        credentials: Username and secret.

    Returns:
        ``"Basic "`` followed by base64 of ``username:secret``.
    """
    token = f"{credentials.username}:{credentials.secret}".encode("utf-8")
    return "Basic " + base64.b64encode(token).decode("ascii")


def build_purge_body(request: PurgeRequest, purge_type: PurgeType) -> dict[str, Any]:
    """Build the purge request body.

    Args:
        request: The purge request.
        purge_type: Operator configured purge type.

    Returns:
        The ``type``/``action``/``domain``/``objects`` body.

    Raises:
        ValidationError: If the request has no targets, or targets
            that do not match the purge type.
    """
    if request.is_empty:
        raise ValidationError("no targets")

    mismatched = [t.value for t in request.targets if t.kind is not purge_type.target_kind]
    if mismatched:
        raise ValidationError(
            f"targets do not match purge type {purge_type.value!r}: {mismatched}"
        )

    return {
        "type": purge_type.value,
        "action": request.kind.value,
        "domain": request.domain.value,
        "objects": request.objects,
    }


def encode_purge_body(body: dict[str, Any], charset: str = "iso-8859-1") -> bytes:
    """Encode a purge body for the wire.

    The JSON text keeps non-ASCII characters unescaped and is encoded
    in the API's single-byte charset. Characters outside that charset
    are replaced with ``?``.

    Args:
        body: The purge body.
        charset: Outbound charset.

    Returns:
        The encoded body.
    """
    text = json.dumps(body, ensure_ascii=False, separators=(",", ":"))
    return text.encode(charset, errors="replace")


class PurgeDispatcher:
    """Sends test and purge requests to the purge API.

    A test is a GET that succeeds on 200; a purge is a POST with a
    JSON body that succeeds on 201. Every other status is reported as
    a rejection, verbatim, for the caller to judge.
    """

    def __init__(
        self,
        transport: IPurgeTransport,
        config: DispatcherConfig | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            transport: Transport used for the single request per dispatch.
            config: Optional dispatcher configuration. Uses defaults if not provided.
        """
        self._transport = transport
        self._config = config or DispatcherConfig()

    @property
    def config(self) -> DispatcherConfig:
        """Get the dispatcher configuration."""
        return self._config

    async def dispatch(
        self,
        request: PurgeRequest | None,
        credentials: Credentials,
        mode: PurgeMode = PurgeMode.PURGE,
    ) -> PurgeOutcome:
        """Send one request to the purge API and classify the response.

        Args:
            request: The purge request. Ignored, and may be None, in TEST mode.
            credentials: Purge API credentials.
            mode: TEST for an authentication check, PURGE to submit.

        Returns:
            Success, Rejected or TransportFailure.
        """
        # Built
        content: bytes | None = None
        if mode is PurgeMode.PURGE:
            if request is None:
                return self._reject(Rejected.validation("no targets"))
            try:
                body = build_purge_body(request, self._config.purge_type)
            except ValidationError as e:
                return self._reject(Rejected.validation(str(e)))
            content = encode_purge_body(body, self._config.charset)

        # Authenticated
        headers = {
            "Authorization": basic_auth_header(credentials),
            "Content-Type": CONTENT_TYPE_JSON,
        }

        # Sent
        method = "GET" if mode is PurgeMode.TEST else "POST"
        try:
            response = await self._transport.send(
                method,
                self._config.endpoint,
                headers,
                content,
            )
        except (TransportError, OSError) as e:
            cause = e
            if isinstance(e, TransportError) and e.cause is not None:
                cause = e.cause
            logger.error("Could not send %s request to %s: %s", mode.value, self._config.endpoint, cause)
            return TransportFailure(cause=cause)

        # Classified
        logger.info("Purge API responded to %s with HTTP %s", mode.value, response.status_code)
        if response.status_code == SUCCESS_STATUS[mode]:
            return Success(status_code=response.status_code, body=response.body)

        return self._reject(Rejected.from_status(response.status_code, response.body))

    def _reject(self, outcome: Rejected) -> Rejected:
        logger.warning("Purge rejected (%s): %s", outcome.kind.value, outcome.reason)
        return outcome
