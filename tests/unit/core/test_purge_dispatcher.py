"""Tests for PurgeDispatcher."""

import json
from unittest.mock import AsyncMock

import pytest

from akamaipurge import (
    Credentials,
    DispatcherConfig,
    DomainTier,
    PurgeDispatcher,
    PurgeMode,
    PurgeRequest,
    PurgeTarget,
    PurgeType,
    Rejected,
    RejectionKind,
    RemovalKind,
    Success,
    TargetKind,
    TransportFailure,
    basic_auth_header,
    build_purge_body,
    encode_purge_body,
)


class TestWireHelpers:
    """Tests for body and header construction."""

    def test_basic_auth_header(self) -> None:
        assert basic_auth_header(Credentials(username="u", secret="p")) == "Basic dTpw"

    def test_cp_code_body(self) -> None:
        request = PurgeRequest.create(["111222", "333444"], target_kind=TargetKind.CP_CODE)

        body = build_purge_body(request, PurgeType.CPCODE)

        assert body["type"] == "cpcode"
        assert body["objects"] == ["111222", "333444"]

    def test_arl_body(self) -> None:
        request = PurgeRequest.create(
            ["https://example.com/a.html"],
            kind=RemovalKind.INVALIDATE,
            domain=DomainTier.STAGING,
        )

        body = build_purge_body(request, PurgeType.ARL)

        assert body == {
            "type": "arl",
            "action": "invalidate",
            "domain": "staging",
            "objects": ["https://example.com/a.html"],
        }
        assert list(body) == ["type", "action", "domain", "objects"]

    def test_body_is_latin1_encoded(self) -> None:
        body = {"type": "arl", "objects": ["https://example.com/café", "https://example.com/日本"]}

        encoded = encode_purge_body(body)

        assert "café".encode("iso-8859-1") in encoded
        assert b"/??" in encoded
        assert json.loads(encoded.decode("iso-8859-1"))["objects"][0].endswith("café")


class TestTestMode:
    """Tests for TEST mode dispatches."""

    async def test_success_on_200(self, make_transport, credentials) -> None:
        transport = make_transport(status_code=200, body='{"queueLength": 0}')
        dispatcher = PurgeDispatcher(transport)

        outcome = await dispatcher.dispatch(None, credentials, PurgeMode.TEST)

        assert isinstance(outcome, Success)
        assert outcome.body == '{"queueLength": 0}'
        call = transport.last_call
        assert call["method"] == "GET"
        assert call["content"] is None
        assert call["url"] == "https://api.ccu.akamai.com/ccu/v2/queues/default"

    @pytest.mark.parametrize("status", [201, 401, 500])
    async def test_other_status_rejected(self, make_transport, credentials, status) -> None:
        dispatcher = PurgeDispatcher(make_transport(status_code=status, body="nope"))

        outcome = await dispatcher.dispatch(None, credentials, PurgeMode.TEST)

        assert isinstance(outcome, Rejected)
        assert outcome.kind is RejectionKind.HTTP_STATUS
        assert outcome.status_code == status
        assert outcome.body == "nope"

    async def test_empty_request_allowed(self, make_transport, credentials) -> None:
        transport = make_transport(status_code=200)

        outcome = await PurgeDispatcher(transport).dispatch(PurgeRequest(), credentials, PurgeMode.TEST)

        assert outcome.ok
        assert len(transport.calls) == 1


class TestPurgeMode:
    """Tests for PURGE mode dispatches."""

    @pytest.fixture
    def request_(self) -> PurgeRequest:
        return PurgeRequest.create(["https://example.com/a.html"])

    async def test_success_on_201(self, transport, credentials, request_) -> None:
        outcome = await PurgeDispatcher(transport).dispatch(request_, credentials, PurgeMode.PURGE)

        assert isinstance(outcome, Success)
        assert outcome.status_code == 201
        assert len(transport.calls) == 1

    @pytest.mark.parametrize("status", [200, 400, 403, 503])
    async def test_other_status_rejected(self, make_transport, credentials, request_, status) -> None:
        outcome = await PurgeDispatcher(make_transport(status_code=status)).dispatch(
            request_, credentials, PurgeMode.PURGE
        )

        assert isinstance(outcome, Rejected)
        assert outcome.status_code == status

    async def test_request_shape(self, transport, credentials, request_) -> None:
        await PurgeDispatcher(transport).dispatch(request_, credentials)

        call = transport.last_call
        assert call["method"] == "POST"
        assert call["headers"]["Authorization"] == "Basic dTpw"
        assert call["headers"]["Content-Type"] == "application/json"
        assert json.loads(call["content"]) == {
            "type": "arl",
            "action": "remove",
            "domain": "production",
            "objects": ["https://example.com/a.html"],
        }

    async def test_custom_endpoint(self, transport, credentials, request_) -> None:
        config = DispatcherConfig(endpoint="https://ccu.example.test/queue")

        await PurgeDispatcher(transport, config).dispatch(request_, credentials)

        assert transport.last_call["url"] == "https://ccu.example.test/queue"

    async def test_cp_code_dispatch(self, transport, credentials) -> None:
        dispatcher = PurgeDispatcher(transport, DispatcherConfig(purge_type=PurgeType.CPCODE))
        request = PurgeRequest.create(["111222", "333444"], target_kind=TargetKind.CP_CODE)

        outcome = await dispatcher.dispatch(request, credentials)

        assert outcome.ok
        body = json.loads(transport.last_call["content"])
        assert body["type"] == "cpcode"
        assert body["objects"] == ["111222", "333444"]


class TestPreconditions:
    """Tests for failures detected before any network I/O."""

    @pytest.mark.parametrize("request_", [PurgeRequest(), None])
    async def test_no_targets(self, transport, credentials, request_) -> None:
        outcome = await PurgeDispatcher(transport).dispatch(request_, credentials, PurgeMode.PURGE)

        assert isinstance(outcome, Rejected)
        assert outcome.kind is RejectionKind.VALIDATION
        assert outcome.reason == "no targets"
        assert transport.calls == []

    async def test_targets_must_match_purge_type(self, transport, credentials) -> None:
        request = PurgeRequest(targets=(PurgeTarget.cp_code("111222"),))

        outcome = await PurgeDispatcher(transport).dispatch(request, credentials)

        assert isinstance(outcome, Rejected)
        assert outcome.kind is RejectionKind.VALIDATION
        assert transport.calls == []


class TestTransportFailures:
    """Tests for network and I/O failures."""

    @pytest.mark.parametrize("mode", [PurgeMode.TEST, PurgeMode.PURGE])
    async def test_io_error_is_transport_failure(self, make_transport, credentials, mode) -> None:
        error = ConnectionError("connection refused")
        dispatcher = PurgeDispatcher(make_transport(error=error))
        request = PurgeRequest.create(["https://example.com/a.html"])

        outcome = await dispatcher.dispatch(request, credentials, mode)

        assert isinstance(outcome, TransportFailure)
        assert outcome.cause is error
        assert outcome.retryable

    @pytest.mark.parametrize(
        "error", [OSError("connection reset by peer"), ConnectionResetError("reset")]
    )
    async def test_unwrapped_os_error_is_transport_failure(self, credentials, error) -> None:
        """A transport raising a plain I/O error still yields a TransportFailure."""
        transport = AsyncMock()
        transport.send.side_effect = error
        dispatcher = PurgeDispatcher(transport)

        outcome = await dispatcher.dispatch(
            PurgeRequest.create(["https://e.test/a"]), credentials, PurgeMode.PURGE
        )

        assert isinstance(outcome, TransportFailure)
        assert outcome.cause is error
        assert outcome.retryable
        transport.send.assert_awaited_once()

    async def test_secret_never_logged(self, make_transport, caplog) -> None:
        creds = Credentials(username="purger", secret="hunter2")
        dispatcher = PurgeDispatcher(make_transport(status_code=401, body="unauthorized"))

        with caplog.at_level("DEBUG"):
            await dispatcher.dispatch(PurgeRequest.create(["https://e.test/a"]), creds)

        assert "hunter2" not in caplog.text
        assert "unauthorized" in caplog.text
