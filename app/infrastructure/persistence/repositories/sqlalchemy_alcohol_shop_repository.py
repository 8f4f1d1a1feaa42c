"""SQLAlchemy implementation of AlcoholShopRepository."""
import logging
import uuid
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.constants import SHOP_SORTABLE_FIELDS
from app.domain.entities.alcohol_shop import AlcoholShop as AlcoholShopEntity
from app.domain.entities.shop_type import ShopType
from app.domain.exceptions import InvalidArgumentError, ShopNotFoundError
from app.domain.repositories.alcohol_shop_repository import AlcoholShopRepository
from app.domain.repositories.paging import Page, PageRequest
from app.domain.value_objects.coordinates import Coordinates
from app.domain.value_objects.phone_number import PhoneNumber
from app.domain.value_objects.working_hours import WorkingHours
from app.infrastructure.persistence import models

logger = logging.getLogger(__name__)


def as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo; stored timestamps are always UTC."""
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def _to_entity(row: models.AlcoholShop) -> AlcoholShopEntity:
    """Map ORM model to domain entity."""
    return AlcoholShopEntity.restore(
        id=row.id,
        name=row.name,
        address=row.address,
        coordinates=Coordinates(latitude=float(row.latitude), longitude=float(row.longitude)),
        created_at=as_utc(row.created_at),
        phone_number=PhoneNumber(row.phone_number) if row.phone_number else None,
        working_hours=WorkingHours(row.working_hours) if row.working_hours else None,
        shop_type=ShopType(row.shop_type) if row.shop_type else None,
    )


def _require_id(shop_id: Optional[UUID]) -> None:
    if shop_id is None:
        raise InvalidArgumentError("ID cannot be None")


class SQLAlchemyAlcoholShopRepository(AlcoholShopRepository):
    """Shop repository using SQLAlchemy."""

    def __init__(self, session: Session):
        self.session = session

    async def save(self, shop: AlcoholShopEntity) -> AlcoholShopEntity:
        if shop is None:
            raise InvalidArgumentError("AlcoholShop cannot be None")

        row = self.session.get(models.AlcoholShop, shop.id) if shop.is_persisted else None
        if row is None:
            row = models.AlcoholShop(id=shop.id or uuid.uuid4(), created_at=shop.created_at)
            self.session.add(row)

        row.name = shop.name
        row.address = shop.address
        row.latitude = shop.coordinates.latitude
        row.longitude = shop.coordinates.longitude
        row.phone_number = shop.phone_number.value if shop.phone_number else None
        row.working_hours = shop.working_hours.value if shop.working_hours else None
        row.shop_type = shop.shop_type.value if shop.shop_type else None

        self._commit()
        self.session.refresh(row)
        shop.assign_id(row.id)
        logger.debug(f"Saved alcohol shop row {row.id}")
        return _to_entity(row)

    async def find_by_id(self, shop_id: UUID) -> Optional[AlcoholShopEntity]:
        _require_id(shop_id)
        row = self.session.get(models.AlcoholShop, shop_id)
        return _to_entity(row) if row else None

    async def find_all(self, page_request: PageRequest) -> Page[AlcoholShopEntity]:
        if page_request.sort_by not in SHOP_SORTABLE_FIELDS:
            raise InvalidArgumentError(f"Cannot sort by '{page_request.sort_by}'")

        column = getattr(models.AlcoholShop, page_request.sort_by)
        rows = (
            self.session.query(models.AlcoholShop)
            .order_by(column.asc(), models.AlcoholShop.id.asc())
            .offset(page_request.offset)
            .limit(page_request.size)
            .all()
        )
        total = self.session.query(models.AlcoholShop).count()
        return Page(
            content=[_to_entity(r) for r in rows],
            page=page_request.page,
            size=page_request.size,
            total_elements=total,
        )

    async def exists_by_id(self, shop_id: UUID) -> bool:
        _require_id(shop_id)
        return self.session.get(models.AlcoholShop, shop_id) is not None

    async def delete_by_id(self, shop_id: UUID) -> None:
        _require_id(shop_id)
        row = self.session.get(models.AlcoholShop, shop_id)
        if row is None:
            raise ShopNotFoundError(shop_id)
        self.session.delete(row)
        self._commit()

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Alcohol shop transaction rolled back: {e}")
            raise
