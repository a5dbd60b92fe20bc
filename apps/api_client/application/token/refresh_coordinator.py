"""Refresh Coordinator.

토큰 갱신 single-flight와 로그아웃 잠금을 관리합니다.

상태:
    - RefreshState: 진행 중인 갱신 Task (최대 1개)
    - LogoutLock: 로그아웃 쿨다운 마감 시각

동시성:
    N개의 요청이 동시에 401/만료를 만나도 네트워크 갱신 호출은 1번만 나가고,
    모두 같은 결과를 기다립니다. 슬롯 확인과 등록 사이에는 await가 없습니다.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Callable, Mapping

from apps.api_client.application.common.constants import (
    ACCESS_TOKEN_HEADER,
    LOGOUT_LOCK_SECONDS,
    REFRESH_TOKEN_PATH,
)
from apps.api_client.application.common.errors import ClassifiedError
from apps.api_client.application.common.exceptions import RefreshFailedError
from apps.api_client.application.common.ports.transport import (
    TransportError,
    TransportNoResponse,
    TransportResponseError,
)
from apps.api_client.application.request.dto import RequestDescriptor
from apps.api_client.domain.entities import TokenRecord
from apps.api_client.domain.exceptions import InvalidTokenRecordError
from apps.api_client.domain.services import ResponseConvention

if TYPE_CHECKING:
    from apps.api_client.application.common.ports import Navigator, Transport
    from apps.api_client.application.token.token_store import TokenStore

logger = logging.getLogger(__name__)


class RefreshCoordinator:
    """토큰 갱신 코디네이터.

    Example:
        >>> coordinator = RefreshCoordinator(token_store, transport, navigator)
        >>> record = await coordinator.refresh_token()
    """

    def __init__(
        self,
        token_store: "TokenStore",
        transport: "Transport",
        navigator: "Navigator",
        *,
        refresh_url: str = REFRESH_TOKEN_PATH,
        convention: ResponseConvention | None = None,
        logout_lock_seconds: float = LOGOUT_LOCK_SECONDS,
        debug_expire_after_seconds: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Args:
            token_store: 토큰 저장소
            transport: 갱신 API 호출용 전송 계층 (인터셉터 없이 직접 호출)
            navigator: 로그아웃 후 루트 이동
            refresh_url: 갱신 API URL
            convention: 비즈니스 성공 판정 규칙
            logout_lock_seconds: 로그아웃 쿨다운 (초)
            debug_expire_after_seconds: 설정 시 갱신된 토큰을 N초 후 만료로 덮어씀
            clock: 쿨다운 계산용 단조 시계
        """
        self._token_store = token_store
        self._transport = transport
        self._navigator = navigator
        self._refresh_url = refresh_url
        self._convention = convention or ResponseConvention()
        self._logout_lock_seconds = logout_lock_seconds
        self._debug_expire_after_seconds = debug_expire_after_seconds
        self._clock = clock

        self._inflight: asyncio.Task[TokenRecord] | None = None
        self._logout_locked_until: float | None = None

    @property
    def is_refreshing(self) -> bool:
        """갱신 진행 여부."""
        return self._inflight is not None and not self._inflight.done()

    @property
    def is_logout_locked(self) -> bool:
        """로그아웃 쿨다운 중 여부."""
        return (
            self._logout_locked_until is not None
            and self._clock() < self._logout_locked_until
        )

    async def refresh_token(self) -> TokenRecord:
        """토큰 갱신 (single-flight).

        진행 중인 갱신이 있으면 새로 시작하지 않고 그 결과를 함께 기다립니다.

        Returns:
            갱신된 TokenRecord

        Raises:
            RefreshFailedError: 토큰 없음/비즈니스 실패/전송 실패
        """
        task = self._inflight
        if task is None or task.done():
            logger.debug("Refresh worker is idle, starting token refresh")
            task = asyncio.create_task(self._run_refresh())
            task.add_done_callback(self._release_slot)
            self._inflight = task
        else:
            logger.debug("Token refresh already in flight, awaiting it")

        # 대기자 하나가 취소돼도 공유 Task는 계속 진행
        return await asyncio.shield(task)

    def _release_slot(self, task: "asyncio.Task[TokenRecord]") -> None:
        if self._inflight is task:
            self._inflight = None
        if not task.cancelled():
            # 모든 대기자가 취소된 경우 "exception was never retrieved" 방지
            task.exception()

    async def _run_refresh(self) -> TokenRecord:
        current = await self._token_store.read()
        if current is None:
            raise RefreshFailedError(ClassifiedError.no_token())

        try:
            next_record = await self._request_next_record(current)
        except RefreshFailedError as e:
            logger.warning("Token refresh rejected", extra={"error": e.message})
            await self.logout()
            raise
        except TransportError as e:
            logger.warning(
                "Token refresh request failed",
                extra={"error": str(e), "error_type": type(e).__name__},
            )
            await self.logout()
            raise RefreshFailedError(self._classify_transport_failure(e)) from e

        if self._debug_expire_after_seconds:
            next_record = next_record.with_expire_at(
                self._token_store.now_ms() + self._debug_expire_after_seconds * 1000
            )

        await self._token_store.write(next_record)
        logger.info("Token refreshed", extra={"expire_at": next_record.expire_at})
        return next_record

    async def _request_next_record(self, current: TokenRecord) -> TokenRecord:
        request = RequestDescriptor(
            endpoint=self._refresh_url,
            method="post",
            body={"refreshToken": current.refresh_token},
            without_auth=True,
            headers={ACCESS_TOKEN_HEADER: current.token},
        )
        response = await self._transport.send(request)
        payload = response.payload
        logger.debug("Refresh response received", extra={"status_code": response.status_code})

        if not self._convention.is_success(payload):
            raise RefreshFailedError(
                ClassifiedError.business_error(
                    "Requesting refresh token failed",
                    status=payload.get("status") if isinstance(payload, Mapping) else None,
                    code=payload.get("code") if isinstance(payload, Mapping) else None,
                    payload=payload,
                )
            )

        try:
            return TokenRecord.from_payload(payload.get("data"))
        except InvalidTokenRecordError as e:
            raise RefreshFailedError(
                ClassifiedError.business_error(e.message, payload=payload)
            ) from e

    @staticmethod
    def _classify_transport_failure(error: TransportError) -> ClassifiedError:
        if isinstance(error, TransportResponseError):
            return ClassifiedError.server_error(
                error.response,
                message="Server responded with HTTP status code out of the range of 2xx",
            )
        if isinstance(error, TransportNoResponse):
            return ClassifiedError.no_response()
        return ClassifiedError.from_transport_error(error)

    async def logout(self) -> bool:
        """로그아웃 (쿨다운 내 중복 호출 무시).

        Returns:
            실제로 로그아웃 부수효과가 실행됐으면 True
        """
        if self.is_logout_locked:
            logger.debug("Logout skipped, lock is held")
            return False

        # await 전에 잠금을 먼저 잡음
        self._logout_locked_until = self._clock() + self._logout_lock_seconds

        await self._token_store.clear()
        self._navigator.to_root()
        logger.info("Logged out, navigated to root")
        return True
