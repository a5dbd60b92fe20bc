"""Httpx Transport.

Transport 포트의 httpx 구현체입니다.

httpx 예외 → Transport 예외 매핑:
    - 2xx 밖의 응답                      → TransportResponseError
    - TimeoutException / 네트워크 오류    → TransportNoResponse
    - UnsupportedProtocol / InvalidURL   → TransportSetupError
    - CancelToken 발동                   → TransportCancelled
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import httpx

from apps.api_client.application.common.ports.transport import (
    TransportCancelled,
    TransportNoResponse,
    TransportResponse,
    TransportResponseError,
    TransportSetupError,
)

if TYPE_CHECKING:
    from apps.api_client.application.request.dto import CancelToken, RequestDescriptor

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class HttpxTransport:
    """httpx.AsyncClient 기반 전송 계층.

    Attributes:
        DEFAULT_TIMEOUT: 기본 타임아웃 (초)
    """

    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        base_url: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Args:
            base_url: API 기본 URL
            timeout: HTTP 타임아웃 (초)
            client: 외부에서 주입한 클라이언트 (테스트/공유용)
        """
        self._base_url = base_url
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self._base_url,
                        timeout=self._timeout,
                    )
        return self._client

    async def send(self, request: "RequestDescriptor") -> TransportResponse:
        """요청 전송."""
        if request.is_cancelled:
            raise TransportCancelled(request.cancel_token.reason)  # type: ignore[union-attr]

        client = await self._get_client()

        try:
            http_request = client.build_request(
                request.http_method,
                request.endpoint,
                json=request.body,
                headers=request.headers,
            )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol, TypeError, ValueError) as e:
            logger.error(
                "Failed to build request",
                extra={"endpoint": request.endpoint, "error": str(e)},
            )
            raise TransportSetupError(str(e)) from e

        logger.debug(
            "Sending request",
            extra={"method": request.http_method, "endpoint": request.endpoint},
        )

        if request.cancel_token is None:
            response = await self._dispatch(client, http_request)
        else:
            response = await self._dispatch_cancellable(
                client, http_request, request.cancel_token
            )

        return self._to_transport_response(response)

    async def _dispatch_cancellable(
        self,
        client: httpx.AsyncClient,
        http_request: httpx.Request,
        cancel_token: "CancelToken",
    ) -> httpx.Response:
        send_task = asyncio.create_task(self._dispatch(client, http_request))
        cancel_task = asyncio.create_task(cancel_token.wait())

        try:
            done, _ = await asyncio.wait(
                {send_task, cancel_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            for task in (send_task, cancel_task):
                if not task.done():
                    task.cancel()

        if send_task in done:
            return send_task.result()

        logger.info(
            "Request cancelled",
            extra={"url": str(http_request.url), "reason": cancel_token.reason},
        )
        raise TransportCancelled(cancel_token.reason)

    async def _dispatch(
        self, client: httpx.AsyncClient, http_request: httpx.Request
    ) -> httpx.Response:
        try:
            return await client.send(http_request)
        except httpx.TimeoutException as e:
            logger.warning("Request timeout", extra={"url": str(http_request.url)})
            raise TransportNoResponse(f"Request timed out: {e}") from e
        except (httpx.UnsupportedProtocol, httpx.LocalProtocolError) as e:
            raise TransportSetupError(str(e)) from e
        except httpx.TransportError as e:
            logger.warning(
                "No response received",
                extra={"url": str(http_request.url), "error": str(e)},
            )
            raise TransportNoResponse(str(e) or "No response was received") from e

    @staticmethod
    def _parse_payload(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def _to_transport_response(self, response: httpx.Response) -> TransportResponse:
        transport_response = TransportResponse(
            status_code=response.status_code,
            payload=self._parse_payload(response),
            headers=dict(response.headers),
        )

        if not transport_response.is_success_status:
            logger.debug(
                "Server responded out of 2xx",
                extra={"status_code": response.status_code, "url": str(response.url)},
            )
            raise TransportResponseError(transport_response)

        return transport_response

    async def close(self) -> None:
        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None
