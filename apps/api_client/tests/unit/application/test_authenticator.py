"""RequestAuthenticator 테스트."""

from __future__ import annotations

import pytest

from apps.api_client.application.common.errors import ErrorKind
from apps.api_client.application.request import RequestAuthenticator, RequestDescriptor
from apps.api_client.application.token import TokenStore
from apps.api_client.tests.helpers import NOW_MS, fresh_record

pytestmark = pytest.mark.asyncio


@pytest.fixture
def authenticator(token_store: TokenStore) -> RequestAuthenticator:
    return RequestAuthenticator(token_store)


class TestAuthenticate:
    """pre-flight 인증."""

    async def test_attaches_access_token_header(
        self, authenticator: RequestAuthenticator, token_store: TokenStore
    ) -> None:
        await token_store.write(fresh_record("access-1"))
        request = RequestDescriptor(endpoint="/orders")

        assert await authenticator.authenticate(request) is None
        assert request.headers == {"Access-Token": "access-1"}

    async def test_without_auth_skips_token(
        self, authenticator: RequestAuthenticator
    ) -> None:
        request = RequestDescriptor(endpoint="/public", without_auth=True)

        assert await authenticator.authenticate(request) is None
        assert request.headers == {}

    async def test_no_token(self, authenticator: RequestAuthenticator) -> None:
        request = RequestDescriptor(endpoint="/orders")

        error = await authenticator.authenticate(request)

        assert error is not None
        assert error.kind is ErrorKind.NO_TOKEN
        assert error.message == "No access token"
        assert request.headers == {}

    async def test_expired_token(
        self, authenticator: RequestAuthenticator, token_store: TokenStore
    ) -> None:
        await token_store.write(fresh_record(expire_at=NOW_MS - 1))
        request = RequestDescriptor(endpoint="/orders")

        error = await authenticator.authenticate(request)

        assert error is not None
        assert error.kind is ErrorKind.TOKEN_EXPIRED
        assert error.message == "Token is already expired"
        assert error.is_unauthorized is True

    async def test_custom_header_name(self, token_store: TokenStore) -> None:
        await token_store.write(fresh_record("access-1"))
        authenticator = RequestAuthenticator(token_store, header_name="Authorization")
        request = RequestDescriptor(endpoint="/orders")

        await authenticator.authenticate(request)

        assert request.headers == {"Authorization": "access-1"}
