"""Request Pipeline.

요청 한 번의 처리 순서를 고정합니다.

Architecture:
    RequestAuthenticator (pre-flight)
        │
        │ None → 전송 / ClassifiedError → 전송 생략
        ▼
    Transport (network I/O)
        │
        │ TransportResponse / TransportError → ClassifiedError
        ▼
    ResponseClassifier (post-flight)
        │
        └── 종료 또는 refresh 후 execute() 재진입 (최대 1회)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.api_client.application.common.errors import ClassifiedError
from apps.api_client.application.common.ports.transport import TransportError

if TYPE_CHECKING:
    from apps.api_client.application.common.ports import Transport
    from apps.api_client.application.request.authenticator import RequestAuthenticator
    from apps.api_client.application.request.classifier import (
        AttemptOutcome,
        CallOutcome,
        ResponseClassifier,
    )
    from apps.api_client.application.request.dto import RequestDescriptor

logger = logging.getLogger(__name__)


class RequestPipeline:
    """authenticator → transport → classifier 파이프라인."""

    def __init__(
        self,
        authenticator: "RequestAuthenticator",
        transport: "Transport",
        classifier: "ResponseClassifier",
    ) -> None:
        self._authenticator = authenticator
        self._transport = transport
        self._classifier = classifier

    async def execute(self, request: "RequestDescriptor") -> "CallOutcome":
        """요청 실행. 실패는 예외가 아니라 RequestError 값으로 반환."""
        outcome = await self._attempt(request)
        return await self._classifier.resolve(request, outcome, self.execute)

    async def _attempt(self, request: "RequestDescriptor") -> "AttemptOutcome":
        # 취소된 요청은 토큰 확인/갱신/재시도에 참여하지 않음
        if request.is_cancelled:
            return ClassifiedError.cancelled(request.cancel_token.reason)  # type: ignore[union-attr]

        rejection = await self._authenticator.authenticate(request)
        if rejection is not None:
            return rejection

        try:
            return await self._transport.send(request)
        except TransportError as e:
            logger.debug(
                "Transport failed",
                extra={"endpoint": request.endpoint, "error_type": type(e).__name__},
            )
            return ClassifiedError.from_transport_error(e)
