"""Cancel Token.

협력적 요청 취소 토큰입니다. 호출자가 cancel()을 부르면 전송 중인 요청이
중단되고 결과는 is_cancelled=True로 돌아옵니다.
"""

from __future__ import annotations

import asyncio


class CancelToken:
    """요청 취소 토큰.

    Example:
        >>> token = CancelToken()
        >>> task = asyncio.create_task(facade.call_api({"endpoint": "/orders", "cancel_token": token}))
        >>> token.cancel("user left the page")
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason: str | None = None

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        return self._reason

    def cancel(self, reason: str | None = None) -> None:
        """취소 요청. 두 번째 호출부터는 무시."""
        if self._event.is_set():
            return
        self._reason = reason
        self._event.set()

    async def wait(self) -> str | None:
        """취소될 때까지 대기 후 사유 반환."""
        await self._event.wait()
        return self._reason
