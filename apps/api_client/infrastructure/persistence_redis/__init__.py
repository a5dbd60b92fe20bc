"""Redis Persistence."""

from apps.api_client.infrastructure.persistence_redis.client import build_async_client
from apps.api_client.infrastructure.persistence_redis.key_value_store_redis import (
    RedisKeyValueStore,
)

__all__ = ["RedisKeyValueStore", "build_async_client"]
