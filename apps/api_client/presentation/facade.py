"""API Facade.

애플리케이션 코드가 호출하는 공개 진입점입니다.

    result = await facade.call_api({"endpoint": "/orders", "method": "get"})
    if isinstance(result, RequestError):
        ...  # 실패 처리
    else:
        ...  # 응답 payload

실패는 예외가 아니라 RequestError 값으로 반환되므로 호출자는 반환값의
타입으로 분기합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

from apps.api_client.application.common.errors import ClassifiedError
from apps.api_client.application.common.ports.notifier import (
    Notification,
    NotificationMode,
)
from apps.api_client.application.common.result import RequestError
from apps.api_client.application.request.dto import RequestDescriptor

if TYPE_CHECKING:
    from apps.api_client.application.common.ports import Notifier
    from apps.api_client.application.request.pipeline import RequestPipeline

logger = logging.getLogger(__name__)


class ApiFacade:
    """call_api / call_api_with_notification 제공."""

    def __init__(self, pipeline: "RequestPipeline", notifier: "Notifier") -> None:
        self._pipeline = pipeline
        self._notifier = notifier

    async def call_api(self, config: Mapping[str, Any]) -> Any:
        """API 호출.

        Args:
            config: 요청 옵션. 화이트리스트 외 키는 버려집니다.
                endpoint, method, body, cancel_token, without_auth,
                disable_error_notification

        Returns:
            성공 시 응답 payload, 실패 시 RequestError
        """
        result = await self._execute(config)
        if isinstance(result, RequestError):
            logger.debug(
                "[call_api] ... FAIL",
                extra={"kind": result.kind.value, "error": result.message},
            )
            return result

        logger.debug("[call_api] ... SUCCESS")
        return result

    async def call_api_with_notification(
        self,
        config: Mapping[str, Any],
        *,
        on_success: Mapping[str, Any] | None = None,
        on_fail: Mapping[str, Any] | None = None,
    ) -> Any:
        """알림을 곁들인 API 호출.

        1. 성공 + on_success → on_success 내용으로 성공 알림
        2. 취소가 아닌 실패 + on_fail → 실패 알림 (content 기본값은 에러 메시지)

        disable_error_notification을 지정하지 않으면 on_fail 유무를 따릅니다.
        on_fail이 있으면 파이프라인의 자동 비즈니스 실패 알림은 꺼집니다.
        """
        config = dict(config)
        if config.get("disable_error_notification") is None:
            config["disable_error_notification"] = bool(on_fail)

        result = await self._execute(config)

        if isinstance(result, RequestError):
            logger.debug(
                "[call_api_with_notification] ... FAIL",
                extra={"kind": result.kind.value, "error": result.message},
            )
            if not result.is_cancelled and on_fail:
                self._notifier.notify(
                    Notification.from_info(
                        on_fail, mode=NotificationMode.FAIL, content=result.message
                    )
                )
            return result

        if on_success:
            self._notifier.notify(
                Notification.from_info(on_success, mode=NotificationMode.SUCCESS)
            )

        logger.debug("[call_api_with_notification] ... SUCCESS")
        return result

    async def _execute(self, config: Mapping[str, Any]) -> Any:
        try:
            request = RequestDescriptor.from_config(config)
        except (TypeError, ValueError) as e:
            return RequestError(error=ClassifiedError.setup_error(e))

        outcome = await self._pipeline.execute(request)
        if isinstance(outcome, RequestError):
            return outcome
        return outcome.payload
