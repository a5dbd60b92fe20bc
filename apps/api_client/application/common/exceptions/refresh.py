"""토큰 갱신 관련 예외."""

from apps.api_client.application.common.errors import ClassifiedError
from apps.api_client.application.common.exceptions.base import ApplicationError


class RefreshFailedError(ApplicationError):
    """토큰 갱신 실패.

    RefreshCoordinator 내부에서만 발생하며, ResponseClassifier가 받아
    RequestError 값으로 변환합니다.
    """

    def __init__(self, error: ClassifiedError) -> None:
        self.error = error
        super().__init__(error.message)
