"""Token Store.

KeyValueStore 위에서 TokenRecord를 읽고 쓰는 유일한 창구입니다.
다른 컴포넌트는 레코드를 직접 수정하지 않고 이 클래스만 거칩니다.
"""

from __future__ import annotations

import json
import logging
import time
from typing import TYPE_CHECKING, Callable

from apps.api_client.application.common.constants import TOKEN_STORAGE_KEY
from apps.api_client.domain.entities import TokenRecord
from apps.api_client.domain.exceptions import InvalidTokenRecordError

if TYPE_CHECKING:
    from apps.api_client.application.common.ports import KeyValueStore

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class TokenStore:
    """토큰 레코드 저장소.

    Attributes:
        key: KeyValueStore 키 (기본 "token")
    """

    def __init__(
        self,
        storage: "KeyValueStore",
        *,
        key: str = TOKEN_STORAGE_KEY,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        """
        Args:
            storage: key-value 저장소
            key: 레코드 저장 키
            clock: 현재 시각 (Unix ms) 제공 함수
        """
        self._storage = storage
        self.key = key
        self._clock = clock

    async def read(self) -> TokenRecord | None:
        """레코드 조회.

        없거나 형식이 잘못되었으면 None. 파싱 오류는 밖으로 던지지 않습니다.
        """
        raw = await self._storage.get_item(self.key)
        if raw is None:
            return None

        try:
            payload = json.loads(raw)
            if payload is None:
                return None
            return TokenRecord.from_payload(payload)
        except (ValueError, TypeError, InvalidTokenRecordError) as e:
            # json.JSONDecodeError는 ValueError 하위 타입
            logger.debug("Stored token record is malformed", extra={"error": str(e)})
            return None

    async def write(self, record: TokenRecord) -> None:
        """레코드 저장 (덮어쓰기)."""
        await self._storage.set_item(self.key, json.dumps(record.to_payload()))
        logger.debug("Token record stored", extra={"expire_at": record.expire_at})

    async def clear(self) -> None:
        """레코드 삭제."""
        await self._storage.remove_item(self.key)

    def now_ms(self) -> int:
        return self._clock()

    def is_expired(self, record: TokenRecord) -> bool:
        """만료 여부 (expire_at < now)."""
        return record.is_expired(self._clock())
