"""TokenRecord Entity 테스트."""

from __future__ import annotations

import pytest

from apps.api_client.domain.entities import TokenRecord
from apps.api_client.domain.exceptions import InvalidTokenRecordError


class TestTokenRecordValidation:
    """생성 시 검증."""

    def test_valid_record(self) -> None:
        record = TokenRecord(token="a", refresh_token="r", expire_at=10)

        assert record.token == "a"
        assert record.refresh_token == "r"
        assert record.expire_at == 10

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"token": "", "refresh_token": "r"},
            {"token": None, "refresh_token": "r"},
            {"token": "a", "refresh_token": ""},
            {"token": "a", "refresh_token": "r", "expire_at": "soon"},
            {"token": "a", "refresh_token": "r", "expire_at": True},
        ],
    )
    def test_invalid_fields_raise(self, kwargs: dict) -> None:
        with pytest.raises(InvalidTokenRecordError, match="Invalid token record"):
            TokenRecord(**kwargs)


class TestTokenRecordExpiry:
    """만료 판정."""

    def test_expire_at_in_past_is_expired(self) -> None:
        record = TokenRecord(token="a", refresh_token="r", expire_at=999)
        assert record.is_expired(1000) is True

    def test_expire_at_equal_to_now_is_not_expired(self) -> None:
        record = TokenRecord(token="a", refresh_token="r", expire_at=1000)
        assert record.is_expired(1000) is False

    def test_with_expire_at_returns_new_record(self) -> None:
        record = TokenRecord(token="a", refresh_token="r", expire_at=1, extra={"uid": 7})

        updated = record.with_expire_at(5000)

        assert updated.expire_at == 5000
        assert updated.extra == {"uid": 7}
        assert record.expire_at == 1


class TestTokenRecordPayload:
    """payload 변환."""

    def test_from_payload_reads_camel_case(self) -> None:
        record = TokenRecord.from_payload(
            {"token": "a", "refreshToken": "r", "expireAt": 123, "userId": 42}
        )

        assert record.refresh_token == "r"
        assert record.expire_at == 123
        assert record.extra == {"userId": 42}

    def test_missing_expire_at_defaults_to_zero(self) -> None:
        record = TokenRecord.from_payload({"token": "a", "refreshToken": "r"})
        assert record.expire_at == 0

    def test_integral_float_expire_at_is_accepted(self) -> None:
        record = TokenRecord.from_payload(
            {"token": "a", "refreshToken": "r", "expireAt": 1700000000000.0}
        )
        assert record.expire_at == 1700000000000

    def test_missing_refresh_token_raises(self) -> None:
        with pytest.raises(InvalidTokenRecordError):
            TokenRecord.from_payload({"token": "a"})

    def test_non_mapping_raises(self) -> None:
        with pytest.raises(InvalidTokenRecordError, match="payload must be an object"):
            TokenRecord.from_payload(None)  # type: ignore[arg-type]

    def test_to_payload_preserves_extra_fields(self) -> None:
        payload = {"token": "a", "refreshToken": "r", "expireAt": 1, "userId": 42}

        assert TokenRecord.from_payload(payload).to_payload() == payload

    def test_repr_masks_token(self) -> None:
        record = TokenRecord(token="secret-token", refresh_token="r")

        assert "secret-token" not in repr(record)
        assert "secr***" in repr(record)
