"""Shop catalog API routes - thin layer delegating to use cases.
Follows Single Responsibility Principle - only handles HTTP concerns."""
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.v1.schemas.error_schemas import ErrorResponseSchema
from app.api.v1.schemas.shop_schemas import (
    AlcoholShopPageSchema,
    AlcoholShopResponseSchema,
    CreateAlcoholShopSchema,
)
from app.application.use_cases.alcohol_shop_use_case import AlcoholShopUseCase
from app.config import settings
from app.core.dependencies import get_alcohol_shop_use_case

router = APIRouter(
    tags=["shops"],
    responses={
        400: {"model": ErrorResponseSchema},
        404: {"model": ErrorResponseSchema},
    },
)


@router.post(
    "/shops",
    response_model=AlcoholShopResponseSchema,
    status_code=status.HTTP_201_CREATED,
)
async def create_shop(
    payload: CreateAlcoholShopSchema,
    use_case: AlcoholShopUseCase = Depends(get_alcohol_shop_use_case),
):
    """Create a new alcohol shop and return it with its assigned ID."""
    created = await use_case.create(payload.to_request())
    return AlcoholShopResponseSchema.model_validate(created)


@router.get("/shops/{shop_id}", response_model=AlcoholShopResponseSchema)
async def get_shop(
    shop_id: UUID,
    use_case: AlcoholShopUseCase = Depends(get_alcohol_shop_use_case),
):
    """Get a shop by its UUID; 404 when it does not exist."""
    return AlcoholShopResponseSchema.model_validate(await use_case.find_by_id(shop_id))


@router.get("/shops", response_model=AlcoholShopPageSchema)
async def list_shops(
    page: int = Query(0, ge=0, description="Page number (0-based)"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    sort_by: str = Query(settings.DEFAULT_SORT_FIELD, description="Field to sort by"),
    use_case: AlcoholShopUseCase = Depends(get_alcohol_shop_use_case),
):
    """
    List shops with pagination and ascending sorting.

    Sortable fields: name, address, shop_type, created_at.
    """
    result = await use_case.find_all(page=page, size=size, sort_by=sort_by)
    return AlcoholShopPageSchema.model_validate(result)


@router.delete("/shops/{shop_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shop(
    shop_id: UUID,
    use_case: AlcoholShopUseCase = Depends(get_alcohol_shop_use_case),
):
    await use_case.delete(shop_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
