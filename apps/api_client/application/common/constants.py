"""API Client 상수."""

# 인증 헤더 이름
ACCESS_TOKEN_HEADER = "Access-Token"

# 토큰 레코드 저장 키
TOKEN_STORAGE_KEY = "token"

# logout() 재실행 방지 시간 (초)
LOGOUT_LOCK_SECONDS = 1.0

# 토큰 갱신 API 경로
REFRESH_TOKEN_PATH = "/api/users/refresh/token"

# call_api에서 허용하는 요청 옵션 (그 외 키는 조용히 버림)
REQUEST_OPTION_WHITELIST: tuple[str, ...] = (
    "endpoint",
    "method",
    "body",
    "cancel_token",
    "without_auth",
    "disable_error_notification",
)
