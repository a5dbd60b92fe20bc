"""KeyValueStore Port.

토큰 레코드 영속화를 위한 문자열 key-value 저장소 인터페이스입니다.
"""

from typing import Protocol


class KeyValueStore(Protocol):
    """Key-value 저장소 인터페이스.

    구현체:
        - InMemoryKeyValueStore (infrastructure/persistence_memory/)
        - RedisKeyValueStore (infrastructure/persistence_redis/)
    """

    async def get_item(self, key: str) -> str | None:
        """값 조회. 없으면 None."""
        ...

    async def set_item(self, key: str, value: str) -> None:
        """값 저장 (덮어쓰기)."""
        ...

    async def remove_item(self, key: str) -> None:
        """값 삭제. 없어도 예외 없음."""
        ...
