"""Dependency Injection.

Clean Architecture의 Composition Root입니다.
모든 의존성을 여기서 조립합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from apps.api_client.application.request.authenticator import RequestAuthenticator
from apps.api_client.application.request.classifier import ResponseClassifier
from apps.api_client.application.request.pipeline import RequestPipeline
from apps.api_client.application.token import RefreshCoordinator, TokenStore
from apps.api_client.infrastructure.http import HttpxTransport
from apps.api_client.infrastructure.navigation import CallbackNavigator
from apps.api_client.infrastructure.notification import LoggingNotifier
from apps.api_client.infrastructure.persistence_memory import InMemoryKeyValueStore
from apps.api_client.infrastructure.persistence_redis import (
    RedisKeyValueStore,
    build_async_client,
)
from apps.api_client.presentation.facade import ApiFacade
from apps.api_client.setup.config import Settings, get_settings

if TYPE_CHECKING:
    import httpx
    import redis.asyncio as aioredis

    from apps.api_client.application.common.ports import KeyValueStore

_logger = logging.getLogger(__name__)


class Container:
    """의존성 컨테이너.

    모든 의존성을 생성하고 관리합니다.
    Clean Architecture 계층 순서대로 조립합니다.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        navigate: Callable[[str], None] | None = None,
        http_client: "httpx.AsyncClient | None" = None,
    ) -> None:
        """
        Args:
            settings: 설정 (미지정 시 환경 변수에서 로드)
            navigate: 로그아웃 후 루트 경로를 받아 화면을 이동시키는 콜백
            http_client: 외부에서 주입한 httpx 클라이언트
        """
        self._settings = settings or get_settings()
        self._navigate = navigate
        self._http_client = http_client

        # Infrastructure
        self._redis: aioredis.Redis | None = None
        self._storage: KeyValueStore | None = None
        self._transport: HttpxTransport | None = None
        self._notifier: LoggingNotifier | None = None
        self._navigator: CallbackNavigator | None = None

        # Application
        self._token_store: TokenStore | None = None
        self._coordinator: RefreshCoordinator | None = None
        self._pipeline: RequestPipeline | None = None

        # Presentation
        self._facade: ApiFacade | None = None

    async def _build_storage(self) -> "KeyValueStore":
        if self._settings.storage_backend == "redis":
            self._redis = build_async_client(
                self._settings.redis_url,
                socket_timeout=self._settings.request_timeout_seconds,
            )
            await self._redis.ping()
            _logger.info("Token storage: redis")
            return RedisKeyValueStore(self._redis)

        _logger.info("Token storage: memory")
        return InMemoryKeyValueStore()

    async def init(self) -> None:
        """의존성 초기화."""
        settings = self._settings
        convention = settings.response_convention()

        # 1. Infrastructure 생성
        self._storage = await self._build_storage()
        self._transport = HttpxTransport(
            base_url=settings.base_url,
            timeout=settings.request_timeout_seconds,
            client=self._http_client,
        )
        self._notifier = LoggingNotifier()
        self._navigator = CallbackNavigator(self._navigate)

        # 2. Application 생성 (Infrastructure 주입)
        self._token_store = TokenStore(self._storage, key=settings.token_storage_key)
        self._coordinator = RefreshCoordinator(
            self._token_store,
            self._transport,
            self._navigator,
            refresh_url=settings.refresh_token_path,
            convention=convention,
            logout_lock_seconds=settings.logout_lock_seconds,
            debug_expire_after_seconds=(
                settings.debug_token_expire_after_seconds if settings.debug else None
            ),
        )
        self._pipeline = RequestPipeline(
            RequestAuthenticator(self._token_store),
            self._transport,
            ResponseClassifier(self._coordinator, self._notifier, convention=convention),
        )

        # 3. Presentation 생성 (Application 주입)
        self._facade = ApiFacade(self._pipeline, self._notifier)

        _logger.info(
            "API client initialized",
            extra={"base_url": settings.base_url, "storage": settings.storage_backend},
        )

    async def close(self) -> None:
        """리소스 정리."""
        if self._transport:
            await self._transport.close()
        if self._redis:
            await self._redis.close()

    @property
    def facade(self) -> ApiFacade:
        """API Facade."""
        if not self._facade:
            raise RuntimeError("Container not initialized")
        return self._facade

    @property
    def token_store(self) -> TokenStore:
        """Token Store (로그인 시 토큰 기록용)."""
        if not self._token_store:
            raise RuntimeError("Container not initialized")
        return self._token_store

    @property
    def notifier(self) -> LoggingNotifier:
        """Notifier (UI 구독용)."""
        if not self._notifier:
            raise RuntimeError("Container not initialized")
        return self._notifier
