"""Coordinate value object - immutable and validated."""
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any

from app.constants import EARTH_RADIUS_KM
from app.domain.exceptions import InvalidArgumentError
from app.domain.result import Result, attempt

_RANGE_MESSAGE = "Coordinates must be within range: latitude [-90, 90], longitude [-180, 180]"


def _check(value: Any, bound: float) -> None:
    if value is None or isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(_RANGE_MESSAGE)
    # NaN fails both comparisons
    if not -bound <= value <= bound:
        raise InvalidArgumentError(_RANGE_MESSAGE)


@dataclass(frozen=True)
class Coordinates:
    """Immutable latitude/longitude pair."""
    latitude: float
    longitude: float

    def __post_init__(self):
        """Validate coordinates."""
        _check(self.latitude, 90)
        _check(self.longitude, 180)

    @classmethod
    def of(cls, latitude: Any, longitude: Any) -> "Result[Coordinates]":
        """Build coordinates without raising."""
        return attempt(lambda: cls(latitude=latitude, longitude=longitude))

    def distance_to(self, other: "Coordinates") -> float:
        """Great-circle distance in kilometers (Haversine).

        Equal coordinates are exactly 0 apart. The converse does not hold: a
        pole reached at different longitudes, or the same meridian written as
        -180 and 180, is one physical point with unequal coordinates, and the
        result is 0 within floating-point noise. Separations below float
        resolution also collapse to 0.
        """
        if other is None:
            raise InvalidArgumentError("Target coordinates cannot be None")

        lat1_rad = math.radians(self.latitude)
        lat2_rad = math.radians(other.latitude)
        dlat = math.radians(other.latitude - self.latitude)
        dlon = math.radians(other.longitude - self.longitude)

        a = (
            math.sin(dlat / 2) ** 2
            + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
        )
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return EARTH_RADIUS_KM * c

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"latitude": self.latitude, "longitude": self.longitude}

    def __str__(self) -> str:
        return f"Coordinates(latitude={self.latitude:.6f}, longitude={self.longitude:.6f})"
