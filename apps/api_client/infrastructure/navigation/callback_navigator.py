"""Callback Navigator.

Navigator 포트의 구현체입니다. 호스트 애플리케이션이 넘긴 콜백으로
"루트로 이동"을 위임합니다.
"""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

ROOT_PATH = "/"


class CallbackNavigator:
    """콜백 기반 네비게이터.

    Attributes:
        root_path: 이동할 진입점 경로
    """

    def __init__(
        self,
        callback: Callable[[str], None] | None = None,
        *,
        root_path: str = ROOT_PATH,
    ) -> None:
        self._callback = callback
        self.root_path = root_path

    def to_root(self) -> None:
        logger.info("Navigating to root", extra={"path": self.root_path})
        if self._callback is not None:
            self._callback(self.root_path)
