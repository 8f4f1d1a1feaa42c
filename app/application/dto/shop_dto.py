"""Data Transfer Objects for the shop catalog use cases."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from app.domain.entities.shop_type import ShopType
from app.domain.repositories.paging import Page

T = TypeVar("T")


@dataclass
class CoordinatesDTO:
    """Raw coordinates as received or returned."""
    latitude: Optional[float]
    longitude: Optional[float]


@dataclass
class CreateAlcoholShopRequest:
    """Unvalidated shop description coming from the boundary."""
    name: str
    address: str
    coordinates: Optional[CoordinatesDTO]
    phone_number: Optional[str] = None
    working_hours: Optional[str] = None
    # Member or its name; resolved by ShopType.parse
    shop_type: Optional[str] = None


@dataclass
class AlcoholShopResponse:
    """Shop as served to callers."""
    id: UUID
    name: str
    address: str
    coordinates: CoordinatesDTO
    phone_number: Optional[str]
    working_hours: Optional[str]
    shop_type: Optional[ShopType]
    created_at: datetime


@dataclass
class PageResponse(Generic[T]):
    """Paginated envelope."""
    content: List[T] = field(default_factory=list)
    current_page: int = 0
    page_size: int = 0
    total_elements: int = 0
    total_pages: int = 0

    @classmethod
    def of(cls, page: Page[T]) -> "PageResponse[T]":
        return cls(
            content=list(page.content),
            current_page=page.page,
            page_size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
        )
