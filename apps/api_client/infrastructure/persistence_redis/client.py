"""Redis Client Provider.

토큰 저장소(storage_backend="redis")용 비동기 클라이언트를 생성합니다.
토큰 레코드 한 건만 읽고 쓰므로 연결 풀은 작게 유지합니다.

Retry:
    ConnectionError / TimeoutError에서 지수 백오프로 MAX_RETRIES회 재시도
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from redis.asyncio.retry import Retry
from redis.backoff import ExponentialBackoff
from redis.exceptions import ConnectionError, TimeoutError

if TYPE_CHECKING:
    import redis.asyncio as aioredis

MAX_CONNECTIONS = 10
MAX_RETRIES = 3
DEFAULT_SOCKET_TIMEOUT = 5.0  # seconds


def build_async_client(
    redis_url: str,
    *,
    socket_timeout: float = DEFAULT_SOCKET_TIMEOUT,
) -> "aioredis.Redis":
    """토큰 저장소용 Redis 클라이언트 생성.

    Args:
        redis_url: 접속 URL
        socket_timeout: 연결/읽기 타임아웃 (초). HTTP 타임아웃과 맞춰 사용
    """
    import redis.asyncio as aioredis

    return aioredis.from_url(
        redis_url,
        decode_responses=True,
        socket_keepalive=True,
        socket_connect_timeout=socket_timeout,
        socket_timeout=socket_timeout,
        max_connections=MAX_CONNECTIONS,
        retry=Retry(ExponentialBackoff(), retries=MAX_RETRIES),
        retry_on_error=[ConnectionError, TimeoutError],
    )
