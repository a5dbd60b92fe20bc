"""Response Convention.

백엔드 payload의 비즈니스 성공 여부를 판정합니다.

payload 형태:
    {"status": ..., "code": ..., "message": ..., "data": ...}

HTTP 2xx라도 payload의 status/code가 실패를 나타내면 비즈니스 실패입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_SUCCESS_STATUSES: tuple[str, ...] = ("200", "SUCCESS")
DEFAULT_SUCCESS_CODE = "CM000000"


@dataclass(frozen=True)
class ResponseConvention:
    """비즈니스 성공 판정 규칙.

    status가 success_statuses 중 하나이거나 code가 success_code이면 성공.
    """

    success_statuses: tuple[str, ...] = DEFAULT_SUCCESS_STATUSES
    success_code: str = DEFAULT_SUCCESS_CODE

    def is_success(self, payload: Any) -> bool:
        if not isinstance(payload, Mapping):
            return False

        status = payload.get("status")
        if status is not None and str(status).upper() in self._normalized_statuses:
            return True

        code = payload.get("code")
        return code is not None and str(code) == self.success_code

    @property
    def _normalized_statuses(self) -> frozenset[str]:
        return frozenset(s.upper() for s in self.success_statuses)

    @staticmethod
    def failure_message(payload: Any) -> str:
        """실패 payload에서 사용자용 메시지 추출."""
        if not isinstance(payload, Mapping):
            return "Server Error with code/status: unknown"
        message = payload.get("message")
        if message:
            return str(message)
        return f"Server Error with code/status: {payload.get('code') or payload.get('status')}"
