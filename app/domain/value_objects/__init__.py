"""Value objects."""
from app.domain.value_objects.coordinates import Coordinates
from app.domain.value_objects.phone_number import PhoneNumber
from app.domain.value_objects.working_hours import WorkingHours

__all__ = [
    "Coordinates",
    "PhoneNumber",
    "WorkingHours",
]
