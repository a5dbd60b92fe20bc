"""Transport Port.

HTTP 전송 계층 인터페이스와 실패 분류용 예외입니다.

실패는 아래 네 가지로 닫혀 있습니다:
    - TransportCancelled: 호출자가 요청을 취소함
    - TransportResponseError: 응답은 받았지만 2xx 범위를 벗어남
    - TransportNoResponse: 요청은 나갔지만 응답이 없음 (네트워크/타임아웃)
    - TransportSetupError: 요청 생성/전송 자체가 실패함
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from apps.api_client.application.request.dto import RequestDescriptor


@dataclass(frozen=True)
class TransportResponse:
    """전송 계층 응답."""

    status_code: int
    payload: Any = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_success_status(self) -> bool:
        return 200 <= self.status_code < 300


class TransportError(Exception):
    """전송 계층 실패 베이스."""

    def __init__(self, message: str = "Transport error") -> None:
        self.message = message
        super().__init__(message)


class TransportCancelled(TransportError):
    """요청이 CancelToken으로 취소됨."""

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        super().__init__(reason or "Request cancelled")


class TransportResponseError(TransportError):
    """서버가 2xx 범위를 벗어난 상태 코드로 응답함."""

    def __init__(self, response: TransportResponse) -> None:
        self.response = response
        super().__init__(f"Server responded with status code {response.status_code}")


class TransportNoResponse(TransportError):
    """요청은 전송됐지만 응답을 받지 못함."""

    def __init__(self, message: str = "No response was received") -> None:
        super().__init__(message)


class TransportSetupError(TransportError):
    """요청 생성 단계에서 실패함."""


class Transport(Protocol):
    """HTTP 전송 인터페이스.

    구현체:
        - HttpxTransport (infrastructure/http/)
    """

    async def send(self, request: "RequestDescriptor") -> TransportResponse:
        """요청 전송.

        Returns:
            2xx 응답

        Raises:
            TransportError: 위 네 가지 하위 타입 중 하나
        """
        ...

    async def close(self) -> None:
        """리소스 정리."""
        ...
