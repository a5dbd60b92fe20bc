"""Navigator Port."""

from typing import Protocol


class Navigator(Protocol):
    """로그아웃 후 애플리케이션 진입점으로 이동시키는 인터페이스.

    구현체:
        - CallbackNavigator (infrastructure/navigation/)
    """

    def to_root(self) -> None:
        """클라이언트 네비게이션 상태를 비우고 루트로 이동."""
        ...
