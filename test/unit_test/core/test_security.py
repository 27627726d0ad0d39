"""Unit tests for password hashing and access tokens."""

import pytest

from webeze.core.errors import AuthenticationError
from webeze.core.security import AccessTokenService, PasswordHasher, TokenPayload

SECRET = "unit-test-secret-key"


class TestPasswordHasher:
    @pytest.fixture
    def hasher(self) -> PasswordHasher:
        return PasswordHasher(iterations=1000)

    def test_hash_format(self, hasher):
        encoded = hasher.hash("S3cure!pass")

        algorithm, iterations, salt, digest = encoded.split("$")
        assert algorithm == "pbkdf2_sha256"
        assert iterations == "1000"
        assert salt and digest

    def test_hash_is_salted(self, hasher):
        assert hasher.hash("S3cure!pass") != hasher.hash("S3cure!pass")

    def test_verify(self, hasher):
        encoded = hasher.hash("S3cure!pass")

        assert hasher.verify("S3cure!pass", encoded) is True
        assert hasher.verify("s3cure!pass", encoded) is False

    def test_verify_uses_stored_iterations(self, hasher):
        encoded = hasher.hash("S3cure!pass")

        assert PasswordHasher(iterations=5000).verify("S3cure!pass", encoded) is True

    @pytest.mark.parametrize(
        "encoded",
        ["", "plaintext", "md5$1$abc$def", "pbkdf2_sha256$notanumber$AAAA$AAAA", "pbkdf2_sha256$1000$***$***"],
    )
    def test_verify_malformed_hash_is_false(self, hasher, encoded):
        assert hasher.verify("S3cure!pass", encoded) is False

    def test_needs_rehash(self, hasher):
        encoded = hasher.hash("S3cure!pass")

        assert hasher.needs_rehash(encoded) is False
        assert PasswordHasher(iterations=2000).needs_rehash(encoded) is True
        assert hasher.needs_rehash("garbage") is True

    def test_rejects_non_positive_iterations(self):
        with pytest.raises(ValueError):
            PasswordHasher(iterations=0)


class TestAccessTokenService:
    @pytest.fixture
    def tokens(self) -> AccessTokenService:
        return AccessTokenService(SECRET, expire_minutes=10)

    def test_round_trip(self, tokens):
        token = tokens.issue(7, "owner@example.com", now=1_700_000_000)

        payload = tokens.verify(token, now=1_700_000_060)

        assert payload == TokenPayload(user_id=7, email="owner@example.com", issued_at=1_700_000_000)

    def test_expired_token(self, tokens):
        token = tokens.issue(7, "owner@example.com", now=1_700_000_000)

        with pytest.raises(AuthenticationError) as exc_info:
            tokens.verify(token, now=1_700_000_000 + 11 * 60)

        assert exc_info.value.message == "Invalid or expired access token"

    def test_token_from_other_secret_is_rejected(self, tokens):
        foreign = AccessTokenService("some-other-secret-key").issue(7, "owner@example.com")

        with pytest.raises(AuthenticationError):
            tokens.verify(foreign)

    def test_tampered_token_is_rejected(self, tokens):
        token = tokens.issue(7, "owner@example.com")
        tampered = token[:-4] + ("AAAA" if not token.endswith("AAAA") else "BBBB")

        with pytest.raises(AuthenticationError):
            tokens.verify(tampered)

    @pytest.mark.parametrize("token", ["", "not-a-token", "ünïcode"])
    def test_garbage_token_is_rejected(self, tokens, token):
        with pytest.raises(AuthenticationError):
            tokens.verify(token)

    def test_expire_seconds(self, tokens):
        assert tokens.expire_seconds == 600

    @pytest.mark.parametrize("secret,minutes", [("short", 10), ("", 10), (SECRET, 0)])
    def test_rejects_bad_configuration(self, secret, minutes):
        with pytest.raises(ValueError):
            AccessTokenService(secret, expire_minutes=minutes)
