"""도메인 엔티티."""

from apps.api_client.domain.entities.token_record import TokenRecord

__all__ = ["TokenRecord"]
