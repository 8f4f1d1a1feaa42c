"""BCrypt password hasher.

Produces standard ``$2b$<cost>$...`` hashes and verifies any ``$2a$``/``$2b$``/``$2y$``
hash, including ones written by other BCrypt implementations.
"""
import logging

import bcrypt

from app.domain.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

# BCrypt only reads the first 72 bytes of the password
MAX_PASSWORD_BYTES = 72
MIN_ROUNDS = 4
MAX_ROUNDS = 31


class BcryptPasswordHasher:
    """PasswordHasher implementation backed by the ``bcrypt`` package."""

    def __init__(self, rounds: int = 10):
        if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
            raise InvalidArgumentError(f"BCrypt rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}")
        self.rounds = rounds

    def hash(self, raw_password: str) -> str:
        if raw_password is None or not raw_password.strip():
            raise InvalidArgumentError("Password cannot be blank")
        encoded = raw_password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise InvalidArgumentError(f"Password must not exceed {MAX_PASSWORD_BYTES} bytes")
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self.rounds)).decode("ascii")

    def verify(self, raw_password: str, password_hash: str) -> bool:
        if raw_password is None or password_hash is None:
            raise InvalidArgumentError("Passwords cannot be None")
        encoded = raw_password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash is not a BCrypt hash")
            return False
