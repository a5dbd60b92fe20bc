"""도메인 예외."""

from apps.api_client.domain.exceptions.base import DomainError
from apps.api_client.domain.exceptions.token import InvalidTokenRecordError

__all__ = [
    "DomainError",
    "InvalidTokenRecordError",
]
