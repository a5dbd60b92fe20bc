"""Application Exceptions."""

from apps.api_client.application.common.exceptions.base import ApplicationError
from apps.api_client.application.common.exceptions.refresh import RefreshFailedError

__all__ = [
    "ApplicationError",
    "RefreshFailedError",
]
