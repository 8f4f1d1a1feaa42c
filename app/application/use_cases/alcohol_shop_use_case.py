"""Use case: shop catalog operations.

Turns request data into value objects and aggregates, delegates to the
storage port and maps results back to response DTOs. Domain errors are never
caught here; they reach the caller unchanged.
"""
import logging
from typing import Optional
from uuid import UUID

from app.application.dto.shop_dto import (
    AlcoholShopResponse,
    CoordinatesDTO,
    CreateAlcoholShopRequest,
    PageResponse,
)
from app.constants import SHOP_SORTABLE_FIELDS
from app.domain.entities.alcohol_shop import AlcoholShop
from app.domain.entities.shop_type import ShopType
from app.domain.exceptions import InvalidArgumentError, ShopNotFoundError
from app.domain.repositories.alcohol_shop_repository import AlcoholShopRepository
from app.domain.repositories.paging import PageRequest
from app.domain.result import Err, Result
from app.domain.value_objects.coordinates import Coordinates
from app.domain.value_objects.phone_number import PhoneNumber
from app.domain.value_objects.working_hours import WorkingHours

logger = logging.getLogger(__name__)


def _valid(result: Result, field_name: str):
    if isinstance(result, Err):
        logger.warning(f"Rejected shop {field_name}: {result.error}")
        raise result.error
    return result.value


def to_response(shop: AlcoholShop) -> AlcoholShopResponse:
    """Map a shop aggregate to its response shape."""
    return AlcoholShopResponse(
        id=shop.id,
        name=shop.name,
        address=shop.address,
        coordinates=CoordinatesDTO(
            latitude=shop.coordinates.latitude,
            longitude=shop.coordinates.longitude,
        ),
        phone_number=shop.phone_number.value if shop.phone_number else None,
        working_hours=shop.working_hours.value if shop.working_hours else None,
        shop_type=shop.shop_type,
        created_at=shop.created_at,
    )


class AlcoholShopUseCase:
    """Create, look up, list and delete shops."""

    def __init__(self, repository: AlcoholShopRepository):
        self._repository = repository

    async def create(self, request: CreateAlcoholShopRequest) -> AlcoholShopResponse:
        """Validate the request, build the aggregate and persist it."""
        coords = request.coordinates
        coordinates = _valid(
            Coordinates.of(
                coords.latitude if coords else None,
                coords.longitude if coords else None,
            ),
            "coordinates",
        )

        phone_number: Optional[PhoneNumber] = None
        if request.phone_number is not None:
            phone_number = _valid(PhoneNumber.parse(request.phone_number), "phone number")

        working_hours: Optional[WorkingHours] = None
        if request.working_hours is not None:
            working_hours = _valid(WorkingHours.parse(request.working_hours), "working hours")

        shop = AlcoholShop.create(
            name=request.name,
            address=request.address,
            coordinates=coordinates,
            phone_number=phone_number,
            working_hours=working_hours,
            shop_type=ShopType.parse(request.shop_type),
        )

        saved = await self._repository.save(shop)
        logger.info(f"Created alcohol shop {saved.id} ({saved.name})")
        return to_response(saved)

    async def find_by_id(self, shop_id: UUID) -> AlcoholShopResponse:
        """Get a shop or raise ``ShopNotFoundError``."""
        shop = await self._repository.find_by_id(shop_id)
        if shop is None:
            logger.warning(f"Alcohol shop {shop_id} not found")
            raise ShopNotFoundError(shop_id)
        return to_response(shop)

    async def find_all(self, page: int, size: int, sort_by: str) -> PageResponse[AlcoholShopResponse]:
        """List one page of shops sorted ascending by ``sort_by``."""
        if sort_by not in SHOP_SORTABLE_FIELDS:
            raise InvalidArgumentError(
                f"Cannot sort by '{sort_by}'. Allowed: {', '.join(SHOP_SORTABLE_FIELDS)}"
            )
        page_request = PageRequest(page=page, size=size, sort_by=sort_by)
        shops = await self._repository.find_all(page_request)
        return PageResponse.of(shops.map(to_response))

    async def delete(self, shop_id: UUID) -> None:
        """Delete a shop; ``ShopNotFoundError`` propagates from the port."""
        await self._repository.delete_by_id(shop_id)
        logger.info(f"Deleted alcohol shop {shop_id}")
