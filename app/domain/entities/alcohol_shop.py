"""AlcoholShop aggregate root."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Union
from uuid import UUID

from app.constants import SHOP_ADDRESS_MAX_LENGTH, SHOP_ADDRESS_MIN_LENGTH, SHOP_NAME_MAX_LENGTH
from app.domain.entities.shop_type import ShopType
from app.domain.exceptions import InvalidArgumentError
from app.domain.value_objects.coordinates import Coordinates
from app.domain.value_objects.phone_number import PhoneNumber
from app.domain.value_objects.working_hours import WorkingHours


def _require_text(value: Optional[str], message: str) -> None:
    if value is None or not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(message)


@dataclass(frozen=True, eq=False)
class AlcoholShop:
    """Shop aggregate.

    Built transient by ``create`` (no id); the storage adapter attaches the
    generated identifier once via ``assign_id``, the only mutation allowed.
    Equality is by identifier.
    """
    name: str
    address: str
    coordinates: Coordinates
    phone_number: Optional[PhoneNumber] = None
    working_hours: Optional[WorkingHours] = None
    shop_type: Optional[ShopType] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: Optional[UUID] = None

    @classmethod
    def create(
        cls,
        name: str,
        address: str,
        coordinates: Coordinates,
        phone_number: Optional[PhoneNumber] = None,
        working_hours: Optional[WorkingHours] = None,
        shop_type: Optional[ShopType] = None,
    ) -> "AlcoholShop":
        """Validate attributes and build an unpersisted shop."""
        _require_text(name, "Shop name cannot be blank")
        if len(name) > SHOP_NAME_MAX_LENGTH:
            raise InvalidArgumentError(f"Shop name must not exceed {SHOP_NAME_MAX_LENGTH} characters")
        _require_text(address, "Address cannot be blank")
        if not SHOP_ADDRESS_MIN_LENGTH <= len(address) <= SHOP_ADDRESS_MAX_LENGTH:
            raise InvalidArgumentError(
                f"Address must be between {SHOP_ADDRESS_MIN_LENGTH} and "
                f"{SHOP_ADDRESS_MAX_LENGTH} characters"
            )
        if not isinstance(coordinates, Coordinates):
            raise InvalidArgumentError("Coordinates are required")

        return cls(
            name=name,
            address=address,
            coordinates=coordinates,
            phone_number=phone_number,
            working_hours=working_hours,
            shop_type=shop_type,
        )

    @classmethod
    def restore(
        cls,
        id: UUID,
        name: str,
        address: str,
        coordinates: Coordinates,
        created_at: datetime,
        phone_number: Optional[PhoneNumber] = None,
        working_hours: Optional[WorkingHours] = None,
        shop_type: Optional[ShopType] = None,
    ) -> "AlcoholShop":
        """Rebuild a persisted shop from storage without re-stamping it."""
        shop = cls(
            name=name,
            address=address,
            coordinates=coordinates,
            phone_number=phone_number,
            working_hours=working_hours,
            shop_type=shop_type,
            created_at=created_at,
        )
        shop.assign_id(id)
        return shop

    def assign_id(self, shop_id: UUID) -> None:
        """Attach the storage-generated identifier (storage adapters only)."""
        if shop_id is None:
            raise InvalidArgumentError("ID cannot be None")
        if self.id is not None and self.id != shop_id:
            raise InvalidArgumentError(f"AlcoholShop already has id {self.id}")
        object.__setattr__(self, "id", shop_id)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def is_open_at(self, instant) -> bool:
        """False when working hours are unknown."""
        if self.working_hours is None:
            return False
        return self.working_hours.is_open_at(instant)

    def distance_to(self, other: Union["AlcoholShop", Coordinates]) -> float:
        if isinstance(other, AlcoholShop):
            other = other.coordinates
        return self.coordinates.distance_to(other)

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, AlcoholShop):
            return NotImplemented
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)
