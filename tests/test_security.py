"""
Password hashing and token helpers.
"""

from datetime import timedelta

import pytest

from snipshare.shared.utils.security import SecurityUtils

SECRET = "unit-test-secret"


class TestPasswords:

    def test_hash_verifies(self):
        hashed = SecurityUtils.hash_password("secret1")
        assert hashed != "secret1"
        assert SecurityUtils.verify_password("secret1", hashed)

    def test_wrong_password_fails(self):
        hashed = SecurityUtils.hash_password("secret1")
        assert not SecurityUtils.verify_password("secret2", hashed)


class TestTokens:

    def test_claims_survive_encoding(self):
        token = SecurityUtils.create_access_token({"user_id": "abc", "username": "ada"}, SECRET)
        claims = SecurityUtils.decode_access_token(token, SECRET)
        assert claims["user_id"] == "abc"
        assert claims["username"] == "ada"
        assert "exp" in claims

    def test_expired_token(self):
        token = SecurityUtils.create_access_token(
            {"user_id": "abc"}, SECRET, expires_delta=timedelta(seconds=-5)
        )
        with pytest.raises(ValueError, match="expired"):
            SecurityUtils.decode_access_token(token, SECRET)

    def test_wrong_secret(self):
        token = SecurityUtils.create_access_token({"user_id": "abc"}, SECRET)
        with pytest.raises(ValueError):
            SecurityUtils.decode_access_token(token, "another-secret")

    def test_garbage(self):
        with pytest.raises(ValueError):
            SecurityUtils.decode_access_token("not.a.token", SECRET)
