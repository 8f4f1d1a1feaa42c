"""AlcoholShop repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from app.domain.entities.alcohol_shop import AlcoholShop
from app.domain.repositories.paging import Page, PageRequest


class AlcoholShopRepository(ABC):
    """Storage port for the AlcoholShop aggregate.

    Implementations raise ``InvalidArgumentError`` for a ``None`` shop or
    identifier, and ``ShopNotFoundError`` when deleting a missing shop.
    """

    @abstractmethod
    async def save(self, shop: AlcoholShop) -> AlcoholShop:
        """Persist a shop and return it with its identifier assigned."""
        pass

    @abstractmethod
    async def find_by_id(self, shop_id: UUID) -> Optional[AlcoholShop]:
        """Get shop by ID."""
        pass

    @abstractmethod
    async def find_all(self, page_request: PageRequest) -> Page[AlcoholShop]:
        """Get one sorted page of shops."""
        pass

    @abstractmethod
    async def exists_by_id(self, shop_id: UUID) -> bool:
        """Check whether a shop exists."""
        pass

    @abstractmethod
    async def delete_by_id(self, shop_id: UUID) -> None:
        """Delete shop by ID."""
        pass
