"""Response Classifier.

요청 시도 한 번의 결과를 상태로 분류하고 복구 방법을 결정하는 상태 머신입니다.

상태 전이:
    CANCELLED                → 종료 (is_cancelled=True)
    PREFLIGHT_NO_TOKEN       → logout() 후 종료 (NO_TOKEN)
    UNAUTHORIZED             → retried면 logout() 후 종료 (TOKEN_EXPIRED)
                               아니면 refresh_token() → retried=True로 재전송
    SERVER_RESPONDED_NON_2XX → 종료 (SERVER_ERROR)
    NO_RESPONSE_RECEIVED     → 종료 (NO_RESPONSE)
    SETUP_FAILURE            → 종료 (SETUP_ERROR)
    BUSINESS_FAILURE         → 실패 알림 후 종료 (BUSINESS_ERROR)
    SUCCESS                  → 응답 반환
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Mapping, Union

from apps.api_client.application.common.errors import ClassifiedError, ErrorKind
from apps.api_client.application.common.exceptions import RefreshFailedError
from apps.api_client.application.common.ports.notifier import (
    Notification,
    NotificationMode,
)
from apps.api_client.application.common.ports.transport import TransportResponse
from apps.api_client.application.common.result import RequestError
from apps.api_client.domain.services import ResponseConvention

if TYPE_CHECKING:
    from apps.api_client.application.common.ports import Notifier
    from apps.api_client.application.request.dto import RequestDescriptor
    from apps.api_client.application.token.refresh_coordinator import RefreshCoordinator

logger = logging.getLogger(__name__)

AttemptOutcome = Union[TransportResponse, ClassifiedError]
CallOutcome = Union[TransportResponse, RequestError]
Resubmit = Callable[["RequestDescriptor"], Awaitable[CallOutcome]]

RETRIED_UNAUTHORIZED_MESSAGE = (
    "The request has been retried, but still receives unauthorized error"
)


class ResponseState(str, Enum):
    """요청 시도 결과 상태."""

    CANCELLED = "cancelled"
    PREFLIGHT_NO_TOKEN = "preflight_no_token"
    UNAUTHORIZED = "unauthorized"
    SERVER_RESPONDED_NON_2XX = "server_responded_non_2xx"
    NO_RESPONSE_RECEIVED = "no_response_received"
    SETUP_FAILURE = "setup_failure"
    BUSINESS_FAILURE = "business_failure"
    SUCCESS = "success"


_TERMINAL_ERROR_STATES: dict[ErrorKind, ResponseState] = {
    ErrorKind.CANCELLED: ResponseState.CANCELLED,
    ErrorKind.NO_TOKEN: ResponseState.PREFLIGHT_NO_TOKEN,
    ErrorKind.TOKEN_EXPIRED: ResponseState.UNAUTHORIZED,
    ErrorKind.SERVER_ERROR: ResponseState.SERVER_RESPONDED_NON_2XX,
    ErrorKind.NO_RESPONSE: ResponseState.NO_RESPONSE_RECEIVED,
    ErrorKind.SETUP_ERROR: ResponseState.SETUP_FAILURE,
    ErrorKind.BUSINESS_ERROR: ResponseState.BUSINESS_FAILURE,
}


class ResponseClassifier:
    """Post-flight 상태 머신.

    재시도는 원래 호출당 1번만 허용되며, retried 플래그가 무한 갱신 루프를 막습니다.
    """

    def __init__(
        self,
        coordinator: "RefreshCoordinator",
        notifier: "Notifier",
        *,
        convention: ResponseConvention | None = None,
    ) -> None:
        self._coordinator = coordinator
        self._notifier = notifier
        self._convention = convention or ResponseConvention()

    def state_of(self, outcome: AttemptOutcome) -> ResponseState:
        """시도 결과 → 상태."""
        if isinstance(outcome, ClassifiedError):
            if outcome.is_unauthorized:
                return ResponseState.UNAUTHORIZED
            return _TERMINAL_ERROR_STATES[outcome.kind]

        if self._convention.is_success(outcome.payload):
            return ResponseState.SUCCESS
        return ResponseState.BUSINESS_FAILURE

    async def resolve(
        self,
        request: "RequestDescriptor",
        outcome: AttemptOutcome,
        resubmit: Resubmit,
    ) -> CallOutcome:
        """상태에 따라 복구/종료를 결정.

        Args:
            request: 시도한 요청
            outcome: 2xx 응답 또는 분류된 실패
            resubmit: 재시도 시 같은 파이프라인으로 재전송하는 함수

        Returns:
            성공 응답 또는 RequestError
        """
        state = self.state_of(outcome)
        logger.debug(
            "Request attempt classified",
            extra={"endpoint": request.endpoint, "state": state.value, "retried": request.retried},
        )

        if state is ResponseState.SUCCESS:
            return outcome  # type: ignore[return-value]

        if state is ResponseState.BUSINESS_FAILURE:
            if isinstance(outcome, TransportResponse):
                return self._business_failure(request, outcome)
            return RequestError(error=outcome, request=request)

        error: ClassifiedError = outcome  # type: ignore[assignment]

        if state is ResponseState.CANCELLED:
            return RequestError.cancelled(request, error.message)

        if state is ResponseState.PREFLIGHT_NO_TOKEN:
            await self._coordinator.logout()
            return RequestError(error=error, request=request)

        if state is ResponseState.UNAUTHORIZED:
            return await self._recover_unauthorized(request, error, resubmit)

        # SERVER_RESPONDED_NON_2XX / NO_RESPONSE_RECEIVED / SETUP_FAILURE
        return RequestError(error=error, request=request, response=error.response)

    async def _recover_unauthorized(
        self,
        request: "RequestDescriptor",
        error: ClassifiedError,
        resubmit: Resubmit,
    ) -> CallOutcome:
        if request.retried:
            logger.warning(
                "Still unauthorized after retry, forcing logout",
                extra={"endpoint": request.endpoint},
            )
            await self._coordinator.logout()
            return RequestError(
                error=ClassifiedError.token_expired(RETRIED_UNAUTHORIZED_MESSAGE),
                request=request,
                response=error.response,
            )

        try:
            await self._coordinator.refresh_token()
        except RefreshFailedError as e:
            return RequestError(error=e.error, request=request, response=e.error.response)

        request.retried = True
        logger.debug("Token refreshed, retrying request", extra={"endpoint": request.endpoint})
        return await resubmit(request)

    def _business_failure(
        self, request: "RequestDescriptor", response: TransportResponse
    ) -> RequestError:
        payload: Mapping[str, Any] = (
            response.payload if isinstance(response.payload, Mapping) else {}
        )
        status = payload.get("status")
        code = payload.get("code")

        if not request.disable_error_notification:
            self._notifier.notify(
                Notification(
                    mode=NotificationMode.FAIL,
                    title=f"Error - {status}",
                    content=payload.get("message") or "call api failed",
                )
            )

        return RequestError(
            error=ClassifiedError.business_error(
                self._convention.failure_message(response.payload),
                status=status,
                code=code,
                payload=response.payload,
            ),
            request=request,
            response=response,
        )
