"""Request Application Services."""

from apps.api_client.application.request.authenticator import RequestAuthenticator
from apps.api_client.application.request.classifier import (
    ResponseClassifier,
    ResponseState,
)
from apps.api_client.application.request.dto import CancelToken, RequestDescriptor
from apps.api_client.application.request.pipeline import RequestPipeline

__all__ = [
    "CancelToken",
    "RequestAuthenticator",
    "RequestDescriptor",
    "RequestPipeline",
    "ResponseClassifier",
    "ResponseState",
]
