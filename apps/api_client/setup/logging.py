"""Logging Configuration.

호스트 애플리케이션이 이 클라이언트에 로그 출력을 맡길 때 호출합니다.

    handler = setup_logging()          # 환경 변수 설정 사용
    handler = setup_logging(settings)  # 명시적 설정

출력은 ECS JSON(stdout)이며 서비스 메타데이터는 핸들러 필터가 레코드마다
붙입니다. 전역 LogRecord factory는 건드리지 않으므로 여러 번 호출해도
메타데이터 주입이 중첩되지 않습니다.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

import ecs_logging

from apps.api_client.setup.config import Settings, get_settings

PACKAGE_LOGGER = "apps.api_client"

# 요청마다 INFO 로그를 남기는 HTTP 클라이언트 라이브러리
NOISY_LOGGERS = ("httpx", "httpcore")


class ServiceContextFilter(logging.Filter):
    """레코드에 service 메타데이터(name/version/environment)를 붙이는 필터."""

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self.service = {
            "name": settings.service_name,
            "version": settings.service_version,
            "environment": settings.environment,
        }

    def filter(self, record: logging.LogRecord) -> bool:
        record.service = dict(self.service)
        return True


def build_handler(settings: Settings, stream: IO[str] | None = None) -> logging.Handler:
    """ECS 포맷터와 서비스 메타데이터 필터를 단 StreamHandler 생성."""
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(ecs_logging.StdlibFormatter())
    handler.addFilter(ServiceContextFilter(settings))
    return handler


def setup_logging(settings: Settings | None = None) -> logging.Handler:
    """루트 로거를 ECS 핸들러 하나로 교체하고 그 핸들러를 반환."""
    settings = settings or get_settings()
    handler = build_handler(settings)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.log_level.upper())

    # debug 모드에서는 요청 단위 로그까지 출력
    package_level = logging.DEBUG if settings.debug else logging.NOTSET
    logging.getLogger(PACKAGE_LOGGER).setLevel(package_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return handler
