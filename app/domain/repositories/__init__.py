"""Repository interfaces."""
from app.domain.repositories.alcohol_shop_repository import AlcoholShopRepository
from app.domain.repositories.paging import Page, PageRequest
from app.domain.repositories.user_repository import UserRepository

__all__ = [
    "AlcoholShopRepository",
    "Page",
    "PageRequest",
    "UserRepository",
]
