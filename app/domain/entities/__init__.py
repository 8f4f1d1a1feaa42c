"""Domain entities (aggregates and their classifications)."""
from app.domain.entities.alcohol_shop import AlcoholShop
from app.domain.entities.role import Role
from app.domain.entities.shop_type import ShopType
from app.domain.entities.user import User

__all__ = [
    "AlcoholShop",
    "Role",
    "ShopType",
    "User",
]
