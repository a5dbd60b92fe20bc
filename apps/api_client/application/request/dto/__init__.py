"""Request DTOs."""

from apps.api_client.application.request.dto.cancel_token import CancelToken
from apps.api_client.application.request.dto.request_descriptor import RequestDescriptor

__all__ = ["CancelToken", "RequestDescriptor"]
