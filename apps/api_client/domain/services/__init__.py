"""도메인 서비스."""

from apps.api_client.domain.services.response_convention import ResponseConvention

__all__ = ["ResponseConvention"]
