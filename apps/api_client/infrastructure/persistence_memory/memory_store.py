"""In-Memory Key-Value Store.

KeyValueStore 포트의 프로세스 로컬 구현체입니다. 단일 이벤트 루프 안에서
쓰기 직후 읽기는 항상 새 값을 봅니다.
"""

from __future__ import annotations


class InMemoryKeyValueStore:
    """dict 기반 key-value 저장소."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)
