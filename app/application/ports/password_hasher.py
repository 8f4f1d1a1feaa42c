"""Password hashing port.

User management only ever sees opaque hashes; implementations decide the
algorithm and can be swapped without changing application logic.
"""
from typing import Protocol


class PasswordHasher(Protocol):
    def hash(self, raw_password: str) -> str:
        """Return an opaque, salted hash of ``raw_password``."""

    def verify(self, raw_password: str, password_hash: str) -> bool:
        """Check ``raw_password`` against a hash produced by ``hash``."""
