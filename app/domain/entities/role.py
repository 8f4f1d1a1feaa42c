"""User role enumeration."""
from enum import Enum

from app.domain.exceptions import InvalidArgumentError


class Role(str, Enum):
    """User role enumeration."""

    USER = "USER"
    ADMIN = "ADMIN"

    @classmethod
    def parse(cls, raw) -> "Role":
        if isinstance(raw, cls):
            return raw
        if raw is None:
            raise InvalidArgumentError("Role is required")
        try:
            return cls[str(raw).strip().upper()]
        except KeyError:
            raise InvalidArgumentError(f"Unknown role '{raw}'. Allowed: USER, ADMIN") from None
