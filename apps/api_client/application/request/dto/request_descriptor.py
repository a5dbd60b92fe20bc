"""Request Descriptor DTO."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from apps.api_client.application.common.constants import REQUEST_OPTION_WHITELIST
from apps.api_client.application.request.dto.cancel_token import CancelToken


@dataclass
class RequestDescriptor:
    """호출 한 번에 대응하는 요청 기술자.

    호출자 옵션 중 화이트리스트 필드와 전송 계층 내부 필드(retried, headers)로
    구성됩니다. 재시도 시 retried가 한 번 True로 바뀝니다.
    """

    endpoint: str
    method: str = "get"
    body: Any = None
    cancel_token: CancelToken | None = None
    without_auth: bool = False
    disable_error_notification: bool = False

    # 전송 계층 내부 필드
    retried: bool = False
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> RequestDescriptor:
        """호출자 설정에서 화이트리스트 필드만 골라 생성."""
        picked = {key: config[key] for key in REQUEST_OPTION_WHITELIST if key in config}
        if not picked.get("endpoint"):
            raise ValueError("endpoint is required")
        if picked.get("method") is None:
            picked.pop("method", None)
        elif not isinstance(picked["method"], str):
            raise TypeError("method must be a string")
        picked["without_auth"] = bool(picked.get("without_auth", False))
        picked["disable_error_notification"] = bool(
            picked.get("disable_error_notification", False)
        )
        return cls(**picked)

    @property
    def http_method(self) -> str:
        return self.method.upper()

    @property
    def is_cancelled(self) -> bool:
        return self.cancel_token is not None and self.cancel_token.is_cancelled
