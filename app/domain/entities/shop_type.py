"""Shop classification enumeration."""
from enum import Enum
from typing import Optional

from app.domain.exceptions import InvalidArgumentError


class ShopType(str, Enum):
    """Closed set of shop classifications."""

    SUPERMARKET = "SUPERMARKET"
    SPECIALTY = "SPECIALTY"
    DUTY_FREE = "DUTY_FREE"

    @property
    def display_name(self) -> str:
        return _DETAILS[self][0]

    @property
    def description(self) -> str:
        return _DETAILS[self][1]

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["ShopType"]:
        """Resolve a member by name; ``None`` stays ``None``."""
        if raw is None or isinstance(raw, cls):
            return raw
        try:
            return cls[str(raw).strip().upper()]
        except KeyError:
            allowed = ", ".join(member.value for member in cls)
            raise InvalidArgumentError(f"Unknown shop type '{raw}'. Allowed: {allowed}") from None


_DETAILS = {
    ShopType.SUPERMARKET: (
        "Supermarket",
        "Large retail chain with general merchandise including alcohol",
    ),
    ShopType.SPECIALTY: (
        "Specialty Store",
        "Specialized alcohol-focused shop with premium selection",
    ),
    ShopType.DUTY_FREE: (
        "Duty Free",
        "Tax-free shop typically located at airports or border crossings",
    ),
}
