"""In-memory implementation of AlcoholShopRepository for testing.
Follows Liskov Substitution Principle - can replace any AlcoholShopRepository."""
import uuid
from typing import Dict, Optional
from uuid import UUID

from app.constants import SHOP_SORTABLE_FIELDS
from app.domain.entities.alcohol_shop import AlcoholShop
from app.domain.exceptions import InvalidArgumentError, ShopNotFoundError
from app.domain.repositories.alcohol_shop_repository import AlcoholShopRepository
from app.domain.repositories.paging import Page, PageRequest


def _require_id(shop_id: Optional[UUID]) -> None:
    if shop_id is None:
        raise InvalidArgumentError("ID cannot be None")


class InMemoryAlcoholShopRepository(AlcoholShopRepository):
    """In-memory implementation for tests and local development."""

    def __init__(self):
        self._shops: Dict[UUID, AlcoholShop] = {}

    async def save(self, shop: AlcoholShop) -> AlcoholShop:
        """Store shop, assigning an ID on first save."""
        if shop is None:
            raise InvalidArgumentError("AlcoholShop cannot be None")
        if not shop.is_persisted:
            shop.assign_id(uuid.uuid4())
        self._shops[shop.id] = shop
        return shop

    async def find_by_id(self, shop_id: UUID) -> Optional[AlcoholShop]:
        _require_id(shop_id)
        return self._shops.get(shop_id)

    async def find_all(self, page_request: PageRequest) -> Page[AlcoholShop]:
        """Sort ascending (missing values first), then slice."""
        sort_by = page_request.sort_by
        if sort_by not in SHOP_SORTABLE_FIELDS:
            raise InvalidArgumentError(f"Cannot sort by '{sort_by}'")

        def key(shop: AlcoholShop):
            value = getattr(shop, sort_by)
            return (value is not None, value if value is not None else "", str(shop.id))

        ordered = sorted(self._shops.values(), key=key)
        start = page_request.offset
        return Page(
            content=ordered[start:start + page_request.size],
            page=page_request.page,
            size=page_request.size,
            total_elements=len(ordered),
        )

    async def exists_by_id(self, shop_id: UUID) -> bool:
        _require_id(shop_id)
        return shop_id in self._shops

    async def delete_by_id(self, shop_id: UUID) -> None:
        _require_id(shop_id)
        if shop_id not in self._shops:
            raise ShopNotFoundError(shop_id)
        del self._shops[shop_id]
