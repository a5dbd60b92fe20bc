"""Test doubles shared across api_client tests."""

from __future__ import annotations

from typing import Any, Awaitable, Callable

from apps.api_client.application.common.ports.transport import TransportResponse
from apps.api_client.application.request.dto import RequestDescriptor
from apps.api_client.domain.entities import TokenRecord

NOW_MS = 1_700_000_000_000

Handler = Callable[[RequestDescriptor], Awaitable[TransportResponse]]


class FakeClock:
    """수동으로 진행시키는 시계."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubTransport:
    """요청을 기록하고 handler로 응답을 만드는 Transport."""

    def __init__(self, handler: Handler | None = None) -> None:
        self.handler = handler
        self.requests: list[RequestDescriptor] = []
        self.sent_headers: list[dict[str, str]] = []
        self.closed = False

    async def send(self, request: RequestDescriptor) -> TransportResponse:
        self.requests.append(request)
        self.sent_headers.append(dict(request.headers))
        if self.handler is None:
            return TransportResponse(status_code=200, payload=ok_payload())
        return await self.handler(request)

    async def close(self) -> None:
        self.closed = True

    def calls_to(self, endpoint: str) -> list[RequestDescriptor]:
        return [r for r in self.requests if r.endpoint == endpoint]


def ok_payload(data: Any = None) -> dict[str, Any]:
    """비즈니스 성공 payload."""
    return {"status": "SUCCESS", "code": "CM000000", "message": "ok", "data": data}


def fresh_record(token: str = "access-1", *, expire_at: int = NOW_MS + 60_000) -> TokenRecord:
    return TokenRecord(token=token, refresh_token=f"refresh-{token}", expire_at=expire_at)
