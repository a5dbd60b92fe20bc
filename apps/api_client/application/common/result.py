"""Request Result.

call_api가 실패 시 반환하는 값입니다. 예외가 아니라 값으로 돌려주므로
호출자는 반환값의 타입으로 성공/실패를 구분합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from apps.api_client.application.common.errors import ClassifiedError, ErrorKind

if TYPE_CHECKING:
    from apps.api_client.application.common.ports.transport import TransportResponse
    from apps.api_client.application.request.dto import RequestDescriptor


@dataclass(frozen=True)
class RequestError:
    """요청 실패 결과.

    Attributes:
        error: 분류된 실패
        request: 실패한 요청
        response: 받은 응답 (있으면)
        is_cancelled: 호출자 취소 여부
    """

    error: ClassifiedError
    request: "RequestDescriptor | None" = None
    response: "TransportResponse | None" = None
    is_cancelled: bool = False

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def message(self) -> str:
        return self.error.message

    @classmethod
    def cancelled(
        cls, request: "RequestDescriptor", reason: str | None = None
    ) -> RequestError:
        """취소 결과 생성."""
        return cls(
            error=ClassifiedError.cancelled(reason),
            request=request,
            is_cancelled=True,
        )
