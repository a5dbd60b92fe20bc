"""API Client Configuration.

env_prefix="API_CLIENT_" 사용.

예시:
    API_CLIENT_BASE_URL → base_url
    API_CLIENT_STORAGE_BACKEND → storage_backend
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from apps.api_client.application.common.constants import (
    LOGOUT_LOCK_SECONDS,
    REFRESH_TOKEN_PATH,
    TOKEN_STORAGE_KEY,
)
from apps.api_client.domain.services.response_convention import (
    DEFAULT_SUCCESS_CODE,
    DEFAULT_SUCCESS_STATUSES,
    ResponseConvention,
)


class Settings(BaseSettings):
    """API Client 설정."""

    # Service
    service_name: str = "api-client"
    service_version: str = "1.0.0"
    environment: str = "development"

    # HTTP
    base_url: str = "http://localhost:8000"
    refresh_token_path: str = REFRESH_TOKEN_PATH
    request_timeout_seconds: float = Field(10.0, gt=0)

    # Token storage
    storage_backend: Literal["memory", "redis"] = "memory"
    redis_url: str = "redis://localhost:6379/0"
    token_storage_key: str = TOKEN_STORAGE_KEY

    # Auth flow
    logout_lock_seconds: float = Field(LOGOUT_LOCK_SECONDS, ge=0)
    debug_token_expire_after_seconds: Optional[int] = Field(
        default=None,
        ge=1,
        description="갱신된 토큰의 만료를 N초 후로 덮어씀 (만료 흐름 디버깅용)",
    )

    # Business response convention
    success_statuses: tuple[str, ...] = DEFAULT_SUCCESS_STATUSES
    success_code: str = DEFAULT_SUCCESS_CODE

    # Logging
    log_level: str = "INFO"
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="API_CLIENT_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def response_convention(self) -> ResponseConvention:
        """비즈니스 성공 판정 규칙."""
        return ResponseConvention(
            success_statuses=tuple(self.success_statuses),
            success_code=self.success_code,
        )


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤을 반환합니다."""
    return Settings()
