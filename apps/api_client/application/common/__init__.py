"""Application Common."""

from apps.api_client.application.common.errors import ClassifiedError, ErrorKind
from apps.api_client.application.common.result import RequestError

__all__ = ["ClassifiedError", "ErrorKind", "RequestError"]
