"""Unit tests for identity token verification."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from forum.config import AuthSettings
from forum.domain.service import JWTService
from forum.util.error import JWTError
from forum.util.jwt import create_token, verify_token

SETTINGS = AuthSettings(jwt_secret="test-secret", jwt_leeway_seconds=0)


def _encode(claims: dict, secret: str = "test-secret") -> str:
    return jwt.encode(claims, secret, algorithm="HS256")


def _expires_in(seconds: int) -> datetime:
    return datetime.now(timezone.utc) + timedelta(seconds=seconds)


class TestVerifyToken:
    def test_issued_token_verifies(self):
        token = create_token("user-1", "alice", SETTINGS)

        payload = verify_token(token, SETTINGS)

        assert payload.user_id == "user-1"
        assert payload.username == "alice"

    def test_expired_token(self):
        token = _encode({"user_id": "user-1", "exp": _expires_in(-60)})

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, SETTINGS)

    def test_leeway_accepts_small_clock_skew(self):
        token = _encode({"user_id": "user-1", "exp": _expires_in(-5)})

        lenient = SETTINGS.model_copy(update={"jwt_leeway_seconds": 30})

        payload = verify_token(token, lenient)

        assert payload.user_id == "user-1"

    def test_wrong_secret(self):
        token = _encode({"user_id": "user-1", "exp": _expires_in(60)}, secret="other")

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, SETTINGS)

    def test_user_id_claim_is_required(self):
        token = _encode({"username": "alice", "exp": _expires_in(60)})

        with pytest.raises(JWTError, match="user_id"):
            verify_token(token, SETTINGS)

    def test_non_string_user_id(self):
        token = _encode({"user_id": 42, "exp": _expires_in(60)})

        with pytest.raises(JWTError, match="malformed"):
            verify_token(token, SETTINGS)


class TestJWTService:
    def test_anonymous_callers(self):
        service = JWTService(SETTINGS)

        assert service.get_user_id_from_token(None) is None
        assert service.get_user_id_from_token("") is None
        assert service.get_user_id_from_token("not-a-token") is None

    def test_known_caller(self):
        service = JWTService(SETTINGS)
        token = service.create_token("user-1", "alice")

        assert service.get_user_id_from_token(token) == "user-1"
