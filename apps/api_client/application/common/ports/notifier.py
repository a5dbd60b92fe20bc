"""Notifier Port.

사용자 알림(성공/실패 토스트 등) 전달 인터페이스입니다.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Protocol


class NotificationMode(str, Enum):
    """알림 종류."""

    FAIL = "fail"
    SUCCESS = "success"


@dataclass(frozen=True)
class Notification:
    """알림 한 건."""

    mode: NotificationMode
    title: str | None = None
    content: str | None = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def from_info(
        cls,
        info: Mapping[str, Any],
        *,
        mode: NotificationMode,
        content: str | None = None,
    ) -> Notification:
        """호출자가 넘긴 알림 정보(title/content/mode)로 생성.

        info의 값이 기본값보다 우선합니다. 알 수 없는 mode는 기본 mode로 대체합니다.
        """
        try:
            resolved = NotificationMode(info.get("mode", mode))
        except ValueError:
            resolved = mode
        return cls(
            mode=resolved,
            title=info.get("title"),
            content=info.get("content", content),
        )


class Notifier(Protocol):
    """알림 전달 인터페이스 (fire-and-forget).

    구현체:
        - LoggingNotifier (infrastructure/notification/)
    """

    def notify(self, notification: Notification) -> None:
        ...
