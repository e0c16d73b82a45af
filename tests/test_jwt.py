"""
Tests for token issuing and verification.
"""

import time

import pytest

from api.exceptions import UnauthorizedError
from auth.jwt import create_token, decode_token, verify_token

SECRET = "unit-secret"


class TestCreateToken:
    def test_claims(self):
        token = create_token("user-1", SECRET, expiry_seconds=3600)
        payload = decode_token(token, SECRET)
        assert payload["sub"] == "user-1"
        assert payload["exp"] == payload["iat"] + 3600
        assert token.count(".") == 2

    def test_issued_at_is_pinned(self):
        now = int(time.time())
        payload = decode_token(create_token("user-1", SECRET, now=now), SECRET)
        assert payload["iat"] == now
        assert payload["exp"] == now + 3600

    def test_verify_returns_subject(self):
        token = create_token("abc", SECRET)
        assert verify_token(token, SECRET) == "abc"


class TestVerifyToken:
    def test_wrong_secret(self):
        token = create_token("abc", SECRET)
        with pytest.raises(UnauthorizedError):
            verify_token(token, "other-secret")

    def test_tampered_payload(self):
        header, _, sig = create_token("abc", SECRET).split(".")
        forged_payload = create_token("evil", "attacker").split(".")[1]
        with pytest.raises(UnauthorizedError):
            verify_token(f"{header}.{forged_payload}.{sig}", SECRET)

    def test_expired(self):
        token = create_token("abc", SECRET, expiry_seconds=60, now=int(time.time()) - 120)
        with pytest.raises(UnauthorizedError):
            verify_token(token, SECRET)

    @pytest.mark.parametrize("token", ["", "garbage", "a.b", "a.b.c.d", "!!!.???.***"])
    def test_malformed(self, token):
        with pytest.raises(UnauthorizedError) as exc_info:
            verify_token(token, SECRET)
        assert exc_info.value.status_code == 401
