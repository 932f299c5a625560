"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from remark.config import AuthSettings
from remark.domain.service import JWTService
from remark.util.jwt import JWTError


class TestJWTService:
    """Tests for token verification."""

    def setup_method(self):
        self.settings = AuthSettings(jwt_secret="test-secret")
        self.service = JWTService(self.settings)

    def test_round_trip(self):
        token = self.service.create_token("5f0c8a1e-0000-4000-8000-000000000001")

        payload = self.service.verify_token(token)

        assert payload.user_id == "5f0c8a1e-0000-4000-8000-000000000001"

    def test_wrong_secret_is_rejected(self):
        token = JWTService(AuthSettings(jwt_secret="other")).create_token("abc")

        with pytest.raises(JWTError):
            self.service.verify_token(token)

    def test_expired_token_is_rejected(self):
        token = jwt.encode(
            {"user_id": "abc", "exp": datetime.now(timezone.utc) - timedelta(days=1)},
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="expired"):
            self.service.verify_token(token)

    def test_get_user_id_from_token_swallows_errors(self):
        assert self.service.get_user_id_from_token(None) is None
        assert self.service.get_user_id_from_token("garbage") is None
        token = self.service.create_token("abc")
        assert self.service.get_user_id_from_token(token) == "abc"
