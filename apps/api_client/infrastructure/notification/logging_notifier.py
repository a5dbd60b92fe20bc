"""Logging Notifier.

Notifier 포트의 구현체입니다. 알림을 로그로 남기고, 등록된 구독자가 있으면
함께 전달합니다 (UI 계층이 구독해 토스트를 띄움).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from apps.api_client.application.common.ports.notifier import NotificationMode

if TYPE_CHECKING:
    from apps.api_client.application.common.ports.notifier import Notification

logger = logging.getLogger(__name__)


class LoggingNotifier:
    """로그 기반 알림 전달자."""

    def __init__(self) -> None:
        self._subscribers: list[Callable[["Notification"], None]] = []

    def subscribe(self, callback: Callable[["Notification"], None]) -> None:
        """알림 구독."""
        self._subscribers.append(callback)

    def notify(self, notification: "Notification") -> None:
        level = logging.WARNING if notification.mode is NotificationMode.FAIL else logging.INFO
        logger.log(
            level,
            "Notification",
            extra={
                "notification_id": notification.id,
                "mode": notification.mode.value,
                "title": notification.title,
                "content": notification.content,
            },
        )
        for callback in self._subscribers:
            try:
                callback(notification)
            except Exception:
                # fire-and-forget: 구독자 오류는 호출자에게 전파하지 않음
                logger.exception("Notification subscriber failed")
