"""Test fixtures for api_client."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from apps.api_client.application.token import RefreshCoordinator, TokenStore
from apps.api_client.infrastructure.persistence_memory import InMemoryKeyValueStore
from apps.api_client.tests.helpers import NOW_MS, FakeClock, StubTransport


@pytest.fixture
def storage() -> InMemoryKeyValueStore:
    """빈 key-value 저장소."""
    return InMemoryKeyValueStore()


@pytest.fixture
def token_store(storage: InMemoryKeyValueStore) -> TokenStore:
    """NOW_MS에 고정된 TokenStore."""
    return TokenStore(storage, clock=lambda: NOW_MS)


@pytest.fixture
def transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def notifier() -> MagicMock:
    """Mock notifier."""
    return MagicMock()


@pytest.fixture
def navigator() -> MagicMock:
    """Mock navigator."""
    return MagicMock()


@pytest.fixture
def monotonic() -> FakeClock:
    return FakeClock(now=100.0)


@pytest.fixture
def coordinator(
    token_store: TokenStore,
    transport: StubTransport,
    navigator: MagicMock,
    monotonic: FakeClock,
) -> RefreshCoordinator:
    """Fake 시계를 쓰는 RefreshCoordinator."""
    return RefreshCoordinator(token_store, transport, navigator, clock=monotonic)
