"""Redis Key-Value Store.

KeyValueStore 포트의 구현체입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import redis.asyncio as aioredis

KEY_PREFIX = "api_client:"


class RedisKeyValueStore:
    """Redis 기반 key-value 저장소.

    KeyValueStore 구현체. 클라이언트는 decode_responses=True로 생성해야 합니다.
    """

    def __init__(self, redis: "aioredis.Redis", *, key_prefix: str = KEY_PREFIX) -> None:
        self._redis = redis
        self._key_prefix = key_prefix

    def _key(self, key: str) -> str:
        return f"{self._key_prefix}{key}"

    async def get_item(self, key: str) -> str | None:
        """값 조회."""
        value = await self._redis.get(self._key(key))
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set_item(self, key: str, value: str) -> None:
        """값 저장."""
        await self._redis.set(self._key(key), value)

    async def remove_item(self, key: str) -> None:
        """값 삭제."""
        await self._redis.delete(self._key(key))
