"""
Password hashing and access token utilities.

Both halves are built on the ``cryptography`` library:

- Passwords are hashed with PBKDF2-HMAC-SHA256 and a random per-password salt.
  The encoded form is ``pbkdf2_sha256$<iterations>$<salt b64>$<hash b64>`` so
  the iteration count can be raised later without invalidating stored hashes.
- Access tokens are Fernet tokens whose key is derived from ``SECRET_KEY``.
  The payload is a small JSON document and expiry is enforced by Fernet's
  built-in timestamp check.
"""

from __future__ import annotations

import base64
import json
import os
import time
from dataclasses import dataclass
from typing import Optional

from cryptography.exceptions import InvalidKey
from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from webeze.core.errors import AuthenticationError
from webeze.core.logging_config import get_logger

logger = get_logger(__name__)

HASH_ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16
KEY_LENGTH = 32
MIN_SECRET_KEY_LENGTH = 16
TOKEN_KEY_SALT = b"webeze-access-token"
TOKEN_KEY_ITERATIONS = 100_000


def _b64encode(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def _b64decode(text: str) -> bytes:
    return base64.b64decode(text.encode("ascii"), validate=True)


class PasswordHasher:
    """Hash and verify user passwords."""

    def __init__(self, iterations: int = 390_000) -> None:
        if iterations < 1:
            raise ValueError("iterations must be positive")
        self.iterations = iterations

    @staticmethod
    def _kdf(salt: bytes, iterations: int) -> PBKDF2HMAC:
        return PBKDF2HMAC(algorithm=hashes.SHA256(), length=KEY_LENGTH, salt=salt, iterations=iterations)

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Args:
            password: Plaintext password

        Returns:
            Encoded hash string safe to store in the database
        """
        salt = os.urandom(SALT_BYTES)
        derived = self._kdf(salt, self.iterations).derive(password.encode("utf-8"))
        return f"{HASH_ALGORITHM}${self.iterations}${_b64encode(salt)}${_b64encode(derived)}"

    def verify(self, password: str, encoded: str) -> bool:
        """
        Check a plaintext password against an encoded hash.

        Malformed or foreign hashes verify as False rather than raising.
        """
        try:
            algorithm, iterations, salt_b64, hash_b64 = encoded.split("$")
            if algorithm != HASH_ALGORITHM:
                return False
            kdf = self._kdf(_b64decode(salt_b64), int(iterations))
            kdf.verify(password.encode("utf-8"), _b64decode(hash_b64))
            return True
        except InvalidKey:
            return False
        except (ValueError, TypeError, AttributeError):
            logger.warning("Encountered malformed password hash during verification")
            return False

    def needs_rehash(self, encoded: str) -> bool:
        """Return True when a stored hash uses a different iteration count than configured."""
        try:
            algorithm, iterations, _, _ = encoded.split("$")
            return algorithm != HASH_ALGORITHM or int(iterations) != self.iterations
        except ValueError:
            return True


@dataclass(frozen=True)
class TokenPayload:
    """Decoded access token claims."""

    user_id: int
    email: str
    issued_at: int


class AccessTokenService:
    """Issue and verify Fernet access tokens."""

    def __init__(self, secret_key: str, expire_minutes: int = 1440) -> None:
        if not secret_key or len(secret_key) < MIN_SECRET_KEY_LENGTH:
            raise ValueError(f"SECRET_KEY must be at least {MIN_SECRET_KEY_LENGTH} characters")
        if expire_minutes < 1:
            raise ValueError("expire_minutes must be positive")
        self.expire_seconds = expire_minutes * 60
        self._fernet = Fernet(self._derive_key(secret_key))

    @staticmethod
    def _derive_key(secret_key: str) -> bytes:
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=KEY_LENGTH,
            salt=TOKEN_KEY_SALT,
            iterations=TOKEN_KEY_ITERATIONS,
        )
        return base64.urlsafe_b64encode(kdf.derive(secret_key.encode("utf-8")))

    def issue(self, user_id: int, email: str, now: Optional[int] = None) -> str:
        """
        Issue an access token for a user.

        Args:
            user_id: Database id of the user
            email: User email address
            now: Issue time as a unix timestamp (defaults to the current time)

        Returns:
            URL-safe token string
        """
        issued_at = int(time.time()) if now is None else now
        payload = json.dumps({"sub": user_id, "email": email}).encode("utf-8")
        return self._fernet.encrypt_at_time(payload, issued_at).decode("ascii")

    def verify(self, token: str, now: Optional[int] = None) -> TokenPayload:
        """
        Verify a token and return its claims.

        Raises:
            AuthenticationError: If the token is malformed, tampered with or expired
        """
        current = int(time.time()) if now is None else now
        try:
            raw = self._fernet.decrypt_at_time(token.encode("ascii"), self.expire_seconds, current)
            issued_at = self._fernet.extract_timestamp(token.encode("ascii"))
            data = json.loads(raw)
            return TokenPayload(user_id=int(data["sub"]), email=str(data["email"]), issued_at=issued_at)
        except (InvalidToken, UnicodeEncodeError):
            raise AuthenticationError("Invalid or expired access token")
        except (ValueError, KeyError, TypeError):
            logger.warning("Access token decrypted but carried an unexpected payload")
            raise AuthenticationError("Invalid or expired access token")
