"""TokenRecord Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from apps.api_client.domain.exceptions.token import InvalidTokenRecordError

# 저장소/서버 payload 필드명 (camelCase)
TOKEN_FIELD = "token"
REFRESH_TOKEN_FIELD = "refreshToken"
EXPIRE_AT_FIELD = "expireAt"

_KNOWN_FIELDS = frozenset({TOKEN_FIELD, REFRESH_TOKEN_FIELD, EXPIRE_AT_FIELD})


@dataclass(frozen=True)
class TokenRecord:
    """영속화된 토큰 레코드.

    로그인 또는 토큰 갱신 성공 시 생성되고, 갱신될 때마다 통째로 덮어쓰며,
    로그아웃 시 삭제됩니다.

    Attributes:
        token: Access token
        refresh_token: Refresh token
        expire_at: 만료 시각 (Unix ms). 서버가 주지 않으면 0 (즉시 만료 취급)
        extra: 갱신 API가 돌려준 나머지 필드 (그대로 보존)
    """

    token: str
    refresh_token: str
    expire_at: int = 0
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.token, str) or not self.token:
            raise InvalidTokenRecordError("token must be a non-empty string")
        if not isinstance(self.refresh_token, str) or not self.refresh_token:
            raise InvalidTokenRecordError("refreshToken must be a non-empty string")
        if isinstance(self.expire_at, bool) or not isinstance(self.expire_at, int):
            raise InvalidTokenRecordError("expireAt must be an integer timestamp")

    def is_expired(self, now_ms: int) -> bool:
        """``expire_at``이 현재 시각보다 과거이면 만료."""
        return self.expire_at < now_ms

    def with_expire_at(self, expire_at: int) -> TokenRecord:
        return TokenRecord(
            token=self.token,
            refresh_token=self.refresh_token,
            expire_at=expire_at,
            extra=dict(self.extra),
        )

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> TokenRecord:
        """저장소/서버 payload에서 레코드 생성.

        Raises:
            InvalidTokenRecordError: 필수 필드 누락 또는 타입 불일치
        """
        if not isinstance(payload, Mapping):
            raise InvalidTokenRecordError("payload must be an object")

        expire_at = payload.get(EXPIRE_AT_FIELD)
        if expire_at is None:
            expire_at = 0
        elif isinstance(expire_at, float) and expire_at.is_integer():
            expire_at = int(expire_at)

        return cls(
            token=payload.get(TOKEN_FIELD),  # type: ignore[arg-type]
            refresh_token=payload.get(REFRESH_TOKEN_FIELD),  # type: ignore[arg-type]
            expire_at=expire_at,
            extra={k: v for k, v in payload.items() if k not in _KNOWN_FIELDS},
        )

    def to_payload(self) -> dict[str, Any]:
        """저장용 payload (extra 필드 포함)."""
        return {
            **self.extra,
            TOKEN_FIELD: self.token,
            REFRESH_TOKEN_FIELD: self.refresh_token,
            EXPIRE_AT_FIELD: self.expire_at,
        }

    def __repr__(self) -> str:
        # 토큰 값 마스킹
        return f"TokenRecord(token={self.token[:4]}***, expire_at={self.expire_at})"
