"""ResponseClassifier 상태 머신 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

from apps.api_client.application.common.errors import ClassifiedError, ErrorKind
from apps.api_client.application.common.ports.notifier import NotificationMode
from apps.api_client.application.common.ports.transport import TransportResponse
from apps.api_client.application.common.result import RequestError
from apps.api_client.application.request import (
    RequestDescriptor,
    ResponseClassifier,
    ResponseState,
)
from apps.api_client.application.request.classifier import RETRIED_UNAUTHORIZED_MESSAGE
from apps.api_client.application.token import RefreshCoordinator, TokenStore
from apps.api_client.tests.helpers import NOW_MS, StubTransport, fresh_record, ok_payload

REFRESHED = {"token": "access-2", "refreshToken": "refresh-2", "expireAt": NOW_MS + 60_000}


@pytest.fixture
def classifier(coordinator: RefreshCoordinator, notifier: MagicMock) -> ResponseClassifier:
    return ResponseClassifier(coordinator, notifier)


@pytest.fixture
def request_descriptor() -> RequestDescriptor:
    return RequestDescriptor(endpoint="/orders")


@pytest.fixture
def resubmit() -> AsyncMock:
    return AsyncMock(return_value=TransportResponse(200, ok_payload("retried")))


def unauthorized() -> ClassifiedError:
    return ClassifiedError.server_error(TransportResponse(401, {"message": "expired"}))


class TestStateOf:
    """시도 결과 → 상태 매핑."""

    @pytest.mark.parametrize(
        ("outcome", "expected"),
        [
            (ClassifiedError.cancelled(), ResponseState.CANCELLED),
            (ClassifiedError.no_token(), ResponseState.PREFLIGHT_NO_TOKEN),
            (ClassifiedError.token_expired(), ResponseState.UNAUTHORIZED),
            (unauthorized(), ResponseState.UNAUTHORIZED),
            (
                ClassifiedError.server_error(TransportResponse(500)),
                ResponseState.SERVER_RESPONDED_NON_2XX,
            ),
            (ClassifiedError.no_response(), ResponseState.NO_RESPONSE_RECEIVED),
            (ClassifiedError.setup_error(ValueError("x")), ResponseState.SETUP_FAILURE),
            (TransportResponse(200, ok_payload()), ResponseState.SUCCESS),
            (TransportResponse(200, {"status": "FAIL"}), ResponseState.BUSINESS_FAILURE),
            (TransportResponse(204, None), ResponseState.BUSINESS_FAILURE),
        ],
    )
    def test_mapping(
        self, classifier: ResponseClassifier, outcome: object, expected: ResponseState
    ) -> None:
        assert classifier.state_of(outcome) is expected  # type: ignore[arg-type]


@pytest.mark.asyncio
class TestTerminalStates:
    """재시도 없이 끝나는 상태."""

    async def test_success_returns_response(
        self,
        classifier: ResponseClassifier,
        request_descriptor: RequestDescriptor,
        resubmit: AsyncMock,
    ) -> None:
        response = TransportResponse(200, ok_payload({"id": 1}))

        result = await classifier.resolve(request_descriptor, response, resubmit)

        assert result is response
        resubmit.assert_not_called()

    async def test_business_failure_notifies(
        self,
        classifier: ResponseClassifier,
        request_descriptor: RequestDescriptor,
        resubmit: AsyncMock,
        notifier: MagicMock,
    ) -> None:
        payload = {"status": "FAIL", "code": "E1", "message": "bad input"}
        response = TransportResponse(200, payload)

        result = await classifier.resolve(request_descriptor, response, resubmit)

        assert isinstance(result, RequestError)
        assert result.kind is ErrorKind.BUSINESS_ERROR
        assert result.message == "bad input"
        assert result.error.code == "E1"
        assert result.response is response

        notifier.notify.assert_called_once()
        notification = notifier.notify.call_args.args[0]
        assert notification.mode is NotificationMode.FAIL
        assert notification.title == "Error - FAIL"
        assert notification.content == "bad input"

    async def test_business_failure_default_content(
        self,
        classifier: ResponseClassifier,
        request_descriptor: RequestDescriptor,
        resubmit: AsyncMock,
        notifier: MagicMock,
    ) -> None:
        response = TransportResponse(200, {"status": "FAIL", "code": "E1"})

        result = await classifier.resolve(request_descriptor, response, resubmit)

        assert result.message == "Server Error with code/status: E1"  # type: ignore[union-attr]
        assert notifier.notify.call_args.args[0].content == "call api failed"

    async def test_business_failure_notification_disabled(
        self,
        classifier: ResponseClassifier,
        resubmit: AsyncMock,
        notifier: MagicMock,
    ) -> None:
        request = RequestDescriptor(endpoint="/orders", disable_error_notification=True)
        response = TransportResponse(200, {"status": "FAIL", "message": "bad input"})

        result = await classifier.resolve(request, response, resubmit)

        assert isinstance(result, RequestError)
        notifier.notify.assert_not_called()

    async def test_cancelled(
        self,
        classifier: ResponseClassifier,
        request_descriptor: RequestDescriptor,
        resubmit: AsyncMock,
        navigator: MagicMock,
    ) -> None:
        result = await classifier.resolve(
            request_descriptor, ClassifiedError.cancelled("left page"), resubmit
        )

        assert isinstance(result, RequestError)
        assert result.is_cancelled is True
        assert result.message == "left page"
        navigator.to_root.assert_not_called()

    async def test_no_token_logs_out(
        self,
        classifier: ResponseClassifier,
        request_descriptor: RequestDescriptor,
        resubmit: AsyncMock,
        navigator: MagicMock,
    ) -> None:
        result = await classifier.resolve(
            request_descriptor, ClassifiedError.no_token(), resubmit
        )

        assert result.kind is ErrorKind.NO_TOKEN  # type: ignore[union-attr]
        navigator.to_root.assert_called_once()
        resubmit.assert_not_called()

    @pytest.mark.parametrize(
        "error",
        [
            ClassifiedError.server_error(TransportResponse(500, {"message": "boom"})),
            ClassifiedError.no_response(),
            ClassifiedError.setup_error(ValueError("bad url")),
        ],
    )
    async def test_transport_failures_pass_through(
        self,
        classifier: ResponseClassifier,
        request_descriptor: RequestDescriptor,
        resubmit: AsyncMock,
        navigator: MagicMock,
        error: ClassifiedError,
    ) -> None:
        result = await classifier.resolve(request_descriptor, error, resubmit)

        assert isinstance(result, RequestError)
        assert result.error == error
        assert result.response is error.response
        navigator.to_root.assert_not_called()


@pytest.mark.asyncio
class TestUnauthorized:
    """401 / 만료 → 갱신 후 1회 재시도."""

    @pytest_asyncio.fixture(autouse=True)
    async def seed(self, token_store: TokenStore, transport: StubTransport) -> None:
        await token_store.write(fresh_record(expire_at=NOW_MS - 1))

        async def refresh_ok(request: RequestDescriptor) -> TransportResponse:
            return TransportResponse(200, ok_payload(REFRESHED))

        transport.handler = refresh_ok

    @pytest.mark.parametrize("error", [unauthorized(), ClassifiedError.token_expired()])
    async def test_refreshes_and_resubmits(
        self,
        classifier: ResponseClassifier,
        request_descriptor: RequestDescriptor,
        resubmit: AsyncMock,
        token_store: TokenStore,
        error: ClassifiedError,
    ) -> None:
        result = await classifier.resolve(request_descriptor, error, resubmit)

        assert result == resubmit.return_value
        resubmit.assert_awaited_once_with(request_descriptor)
        assert request_descriptor.retried is True
        assert (await token_store.read()).token == "access-2"  # type: ignore[union-attr]

    async def test_retried_request_is_terminal(
        self,
        classifier: ResponseClassifier,
        resubmit: AsyncMock,
        transport: StubTransport,
        navigator: MagicMock,
    ) -> None:
        request = RequestDescriptor(endpoint="/orders", retried=True)

        result = await classifier.resolve(request, unauthorized(), resubmit)

        assert isinstance(result, RequestError)
        assert result.kind is ErrorKind.TOKEN_EXPIRED
        assert result.message == RETRIED_UNAUTHORIZED_MESSAGE
        assert result.response is not None
        assert result.response.status_code == 401
        assert transport.requests == []
        navigator.to_root.assert_called_once()
        resubmit.assert_not_called()

    async def test_refresh_failure_is_returned(
        self,
        classifier: ResponseClassifier,
        request_descriptor: RequestDescriptor,
        resubmit: AsyncMock,
        transport: StubTransport,
        navigator: MagicMock,
    ) -> None:
        async def rejected(request: RequestDescriptor) -> TransportResponse:
            return TransportResponse(200, {"status": "FAIL"})

        transport.handler = rejected

        result = await classifier.resolve(request_descriptor, unauthorized(), resubmit)

        assert isinstance(result, RequestError)
        assert result.kind is ErrorKind.BUSINESS_ERROR
        assert result.message == "Requesting refresh token failed"
        assert request_descriptor.retried is False
        navigator.to_root.assert_called_once()
        resubmit.assert_not_called()
