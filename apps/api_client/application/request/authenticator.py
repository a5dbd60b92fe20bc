"""Request Authenticator.

요청이 네트워크로 나가기 전에 실행되는 pre-flight 단계입니다.
without_auth 요청은 그대로 통과시키고, 그 외에는 저장된 토큰을 헤더에 붙입니다.
토큰이 없거나 만료됐으면 전송 없이 즉시 실패를 돌려줍니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.api_client.application.common.constants import ACCESS_TOKEN_HEADER
from apps.api_client.application.common.errors import ClassifiedError

if TYPE_CHECKING:
    from apps.api_client.application.request.dto import RequestDescriptor
    from apps.api_client.application.token.token_store import TokenStore

logger = logging.getLogger(__name__)


class RequestAuthenticator:
    """Pre-flight 인증 단계."""

    def __init__(
        self, token_store: "TokenStore", *, header_name: str = ACCESS_TOKEN_HEADER
    ) -> None:
        self._token_store = token_store
        self._header_name = header_name

    async def authenticate(self, request: "RequestDescriptor") -> ClassifiedError | None:
        """토큰 부착.

        Returns:
            None이면 전송 진행, ClassifiedError(NO_TOKEN/TOKEN_EXPIRED)면 전송 생략
        """
        if request.without_auth:
            return None

        record = await self._token_store.read()
        if record is None:
            logger.debug("No token stored", extra={"endpoint": request.endpoint})
            return ClassifiedError.no_token()

        if self._token_store.is_expired(record):
            logger.debug("Stored token expired", extra={"endpoint": request.endpoint})
            return ClassifiedError.token_expired()

        request.headers[self._header_name] = record.token
        return None
