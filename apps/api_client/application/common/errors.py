"""Classified Error.

요청 실패를 닫힌 태그 유니온으로 표현합니다.
전송 계층 예외는 파이프라인 경계에서 한 번만 이 타입으로 변환됩니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from apps.api_client.application.common.ports.transport import (
    TransportCancelled,
    TransportError,
    TransportNoResponse,
    TransportResponseError,
)

if TYPE_CHECKING:
    from apps.api_client.application.common.ports.transport import TransportResponse


class ErrorKind(str, Enum):
    """실패 종류."""

    CANCELLED = "cancelled"
    NO_TOKEN = "no_token"
    TOKEN_EXPIRED = "token_expired"
    SERVER_ERROR = "server_error"
    NO_RESPONSE = "no_response"
    SETUP_ERROR = "setup_error"
    BUSINESS_ERROR = "business_error"


@dataclass(frozen=True)
class ClassifiedError:
    """분류된 실패.

    Attributes:
        kind: 실패 종류
        message: 사람이 읽을 메시지
        status: HTTP 상태 코드 (SERVER_ERROR) 또는 payload status (BUSINESS_ERROR)
        code: payload code (BUSINESS_ERROR)
        payload: 응답 payload (있으면)
        cause: 원본 예외 (SETUP_ERROR 등)
        response: 받은 응답 (SERVER_ERROR)
    """

    kind: ErrorKind
    message: str
    status: Any = None
    code: Any = None
    payload: Any = None
    cause: BaseException | None = None
    response: "TransportResponse | None" = field(default=None, compare=False)

    @property
    def is_unauthorized(self) -> bool:
        """401 응답 또는 pre-flight 만료."""
        if self.kind == ErrorKind.TOKEN_EXPIRED:
            return True
        return self.kind == ErrorKind.SERVER_ERROR and self.status == 401

    @classmethod
    def cancelled(cls, reason: str | None = None) -> ClassifiedError:
        return cls(kind=ErrorKind.CANCELLED, message=reason or "Request cancelled")

    @classmethod
    def no_token(cls, message: str = "No access token") -> ClassifiedError:
        return cls(kind=ErrorKind.NO_TOKEN, message=message)

    @classmethod
    def token_expired(cls, message: str = "Token is already expired") -> ClassifiedError:
        return cls(kind=ErrorKind.TOKEN_EXPIRED, message=message)

    @classmethod
    def server_error(
        cls,
        response: "TransportResponse",
        message: str = "Server responded with a status code that is out of range of 2xx",
    ) -> ClassifiedError:
        return cls(
            kind=ErrorKind.SERVER_ERROR,
            message=message,
            status=response.status_code,
            payload=response.payload,
            response=response,
        )

    @classmethod
    def no_response(cls, message: str = "No response was received") -> ClassifiedError:
        return cls(kind=ErrorKind.NO_RESPONSE, message=message)

    @classmethod
    def setup_error(cls, cause: BaseException) -> ClassifiedError:
        return cls(kind=ErrorKind.SETUP_ERROR, message=str(cause), cause=cause)

    @classmethod
    def business_error(
        cls,
        message: str,
        *,
        status: Any = None,
        code: Any = None,
        payload: Any = None,
    ) -> ClassifiedError:
        return cls(
            kind=ErrorKind.BUSINESS_ERROR,
            message=message,
            status=status,
            code=code,
            payload=payload,
        )

    @classmethod
    def from_transport_error(cls, error: TransportError) -> ClassifiedError:
        """전송 계층 예외 → ClassifiedError."""
        if isinstance(error, TransportCancelled):
            return cls.cancelled(error.reason)
        if isinstance(error, TransportResponseError):
            return cls.server_error(error.response)
        if isinstance(error, TransportNoResponse):
            return cls.no_response(error.message)
        return cls.setup_error(error)
