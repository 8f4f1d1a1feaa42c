"""Working hours value object.

Parses an ``open-close`` window such as ``"9:00-22:00"`` or ``"9-22"`` and
answers whether a shop is open at a given time of day.
"""
import re
from dataclasses import dataclass, field
from datetime import datetime, time
from typing import Optional, Union

from app.constants import WORKING_HOURS_MAX_LENGTH
from app.domain.exceptions import InvalidArgumentError
from app.domain.result import Result, attempt

INVALID_TIME_FORMAT = "Invalid time format"

# Close time "24" / "24:00" means "until the end of the day"
END_OF_DAY = time.max

_TOKEN = re.compile(r"([0-9]{1,2})(?::([0-9]{2}))?")


def _parse_token(token: str, allow_end_of_day: bool) -> time:
    match = _TOKEN.fullmatch(token)
    if not match:
        raise InvalidArgumentError(INVALID_TIME_FORMAT)

    hour = int(match.group(1))
    minute = int(match.group(2)) if match.group(2) is not None else 0

    if minute > 59:
        raise InvalidArgumentError(INVALID_TIME_FORMAT)
    if hour == 24 and minute == 0 and allow_end_of_day:
        return END_OF_DAY
    if hour > 23:
        raise InvalidArgumentError(INVALID_TIME_FORMAT)
    return time(hour, minute)


@dataclass(frozen=True)
class WorkingHours:
    """Daily opening window; equality is by the textual value."""
    value: str
    open_time: time = field(init=False, compare=False)
    close_time: time = field(init=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidArgumentError(INVALID_TIME_FORMAT)

        text = self.value.strip()
        if len(text) > WORKING_HOURS_MAX_LENGTH:
            raise InvalidArgumentError(INVALID_TIME_FORMAT)
        parts = [part.strip() for part in text.split("-")]
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise InvalidArgumentError(INVALID_TIME_FORMAT)

        open_part, close_part = parts
        # "9-22" and "9:00-22:00" are both fine, "9-22:00" is not
        if (":" in open_part) != (":" in close_part):
            raise InvalidArgumentError(INVALID_TIME_FORMAT)

        object.__setattr__(self, "value", text)
        object.__setattr__(self, "open_time", _parse_token(open_part, allow_end_of_day=False))
        object.__setattr__(self, "close_time", _parse_token(close_part, allow_end_of_day=True))

    @classmethod
    def parse(cls, value: Optional[str]) -> "Result[WorkingHours]":
        return attempt(lambda: cls(value))

    def is_open_at(self, instant: Optional[Union[datetime, time]]) -> bool:
        """Check whether the window contains the instant's time of day.

        Both boundaries are inclusive. A window whose close time precedes its
        open time runs overnight; equal open and close times mean the shop
        never closes.
        """
        if instant is None:
            return False

        moment = instant.time() if isinstance(instant, datetime) else instant
        moment = moment.replace(tzinfo=None)

        if self.open_time < self.close_time:
            return self.open_time <= moment <= self.close_time
        if self.open_time == self.close_time:
            return True
        return moment >= self.open_time or moment <= self.close_time

    def is_closed(self) -> bool:
        """Structural flag: a constructed window never represents "closed".

        Unknown or absent hours are modelled as ``None`` on the shop instead.
        """
        return False

    def __str__(self) -> str:
        return self.value
