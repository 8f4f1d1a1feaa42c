"""Phone number value object."""
import re
from dataclasses import dataclass
from typing import Optional

from app.domain.exceptions import InvalidArgumentError
from app.domain.result import Result, attempt

PHONE_PATTERN = re.compile(r"\+7[0-9]{10}")


@dataclass(frozen=True)
class PhoneNumber:
    """Optional national phone number in ``+7XXXXXXXXXX`` form.

    A ``None`` value is a legitimate "no phone" state, not a failure.
    """
    value: Optional[str] = None

    def __post_init__(self):
        if self.value is None:
            return
        if not isinstance(self.value, str) or not PHONE_PATTERN.fullmatch(self.value):
            raise InvalidArgumentError("Invalid phone number format")

    @classmethod
    def parse(cls, value: Optional[str]) -> "Result[PhoneNumber]":
        return attempt(lambda: cls(value))

    def is_valid(self) -> bool:
        """True when a number is present."""
        return self.value is not None

    def __str__(self) -> str:
        return self.value if self.value is not None else "not specified"
