"""Application Ports.

Infrastructure 계층의 인터페이스를 정의합니다.
"""

from apps.api_client.application.common.ports.key_value_store import KeyValueStore
from apps.api_client.application.common.ports.navigator import Navigator
from apps.api_client.application.common.ports.notifier import (
    Notification,
    NotificationMode,
    Notifier,
)
from apps.api_client.application.common.ports.transport import (
    Transport,
    TransportCancelled,
    TransportError,
    TransportNoResponse,
    TransportResponse,
    TransportResponseError,
    TransportSetupError,
)

__all__ = [
    "KeyValueStore",
    "Navigator",
    "Notification",
    "NotificationMode",
    "Notifier",
    "Transport",
    "TransportCancelled",
    "TransportError",
    "TransportNoResponse",
    "TransportResponse",
    "TransportResponseError",
    "TransportSetupError",
]
