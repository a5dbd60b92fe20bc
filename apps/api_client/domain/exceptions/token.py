"""Token 도메인 예외."""

from apps.api_client.domain.exceptions.base import DomainError


class InvalidTokenRecordError(DomainError):
    """저장된 토큰 레코드의 형식이 올바르지 않음."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid token record: {reason}")
