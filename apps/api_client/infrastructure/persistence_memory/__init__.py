"""In-Memory Persistence."""

from apps.api_client.infrastructure.persistence_memory.memory_store import (
    InMemoryKeyValueStore,
)

__all__ = ["InMemoryKeyValueStore"]
