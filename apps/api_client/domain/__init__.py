"""API Client Domain Layer."""

from apps.api_client.domain.entities import TokenRecord
from apps.api_client.domain.exceptions import DomainError, InvalidTokenRecordError
from apps.api_client.domain.services import ResponseConvention

__all__ = ["TokenRecord", "ResponseConvention", "DomainError", "InvalidTokenRecordError"]
