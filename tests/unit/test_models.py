"""Unit tests for AccessToken, ApiEnvelope and the error hierarchy."""

from __future__ import annotations

import pytest

from imgur_api.models.envelope import ApiEnvelope
from imgur_api.models.token import AccessToken
from imgur_api.utils.errors import ConfigurationError, ImgurError


class TestAccessToken:
    def test_coerce_plain_string(self) -> None:
        token = AccessToken.coerce("abc")
        assert token.access_token == "abc"
        assert token.authorization() == "Bearer abc"

    def test_coerce_bearer_string(self) -> None:
        assert AccessToken.coerce("Bearer abc").authorization() == "Bearer abc"

    def test_coerce_token_endpoint_mapping(self) -> None:
        token = AccessToken.coerce(
            {
                "access_token": "abc",
                "expires_in": 315360000,
                "token_type": "bearer",
                "refresh_token": "ref",
                "account_id": 123,
                "account_username": "cat",
                "unknown": "ignored",
            }
        )
        assert token.refresh_token == "ref"
        assert token.account_id == 123

    def test_coerce_passthrough(self) -> None:
        token = AccessToken(access_token="abc")
        assert AccessToken.coerce(token) is token

    @pytest.mark.parametrize(
        "payload",
        [{"token_type": "bearer", "refresh_token": "r"}, {"access_token": None}],
    )
    def test_mapping_without_access_token_is_unusable(self, payload: dict) -> None:
        token = AccessToken.coerce(payload)
        assert token.access_token == ""
        assert token.is_usable() is False

    def test_empty_token_is_not_usable(self) -> None:
        assert AccessToken(access_token="").is_usable() is False


class TestApiEnvelope:
    def test_decode(self) -> None:
        envelope = ApiEnvelope.decode('{"data": {"id": "x"}, "success": true, "status": 200}')
        assert envelope is not None
        assert envelope.data == {"id": "x"}
        assert envelope.success is True
        assert envelope.status == 200

    @pytest.mark.parametrize(
        "raw",
        [None, "", "not json", "[1, 2]", '{"success": true}', '{"data": 1, "status": "bad"}'],
    )
    def test_decode_rejects(self, raw: str | None) -> None:
        assert ApiEnvelope.decode(raw) is None


class TestErrors:
    def test_provider_prefix(self) -> None:
        error = ConfigurationError("missing id", provider_name="imgur")
        assert str(error) == "[imgur] missing id"
        assert isinstance(error, ImgurError)

    def test_default_message(self) -> None:
        assert str(ImgurError()) == "An unexpected error occurred"
