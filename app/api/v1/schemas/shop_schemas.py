"""Pydantic schemas for the shop catalog API."""
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.application.dto.shop_dto import CoordinatesDTO, CreateAlcoholShopRequest
from app.domain.entities.shop_type import ShopType


class CoordinatesSchema(BaseModel):
    """Coordinates schema."""
    model_config = ConfigDict(from_attributes=True)

    latitude: Optional[float] = Field(default=None, examples=[55.7558])
    longitude: Optional[float] = Field(default=None, examples=[37.6173])


class CreateAlcoholShopSchema(BaseModel):
    """Shop creation payload; business rules are checked by the domain."""
    name: str = Field(examples=["Wine Cellar"])
    address: str = Field(examples=["Moscow, Tverskaya st. 1"])
    coordinates: Optional[CoordinatesSchema] = None
    phone_number: Optional[str] = Field(default=None, examples=["+79991234567"])
    working_hours: Optional[str] = Field(default=None, examples=["9:00-22:00"])
    shop_type: Optional[str] = Field(default=None, examples=["SPECIALTY"])

    def to_request(self) -> CreateAlcoholShopRequest:
        coordinates = None
        if self.coordinates is not None:
            coordinates = CoordinatesDTO(
                latitude=self.coordinates.latitude,
                longitude=self.coordinates.longitude,
            )
        return CreateAlcoholShopRequest(
            name=self.name,
            address=self.address,
            coordinates=coordinates,
            phone_number=self.phone_number,
            working_hours=self.working_hours,
            shop_type=self.shop_type,
        )


class AlcoholShopResponseSchema(BaseModel):
    """Shop response schema."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    address: str
    coordinates: CoordinatesSchema
    phone_number: Optional[str] = None
    working_hours: Optional[str] = None
    shop_type: Optional[ShopType] = None
    created_at: datetime


class AlcoholShopPageSchema(BaseModel):
    """Paginated shop list."""
    model_config = ConfigDict(from_attributes=True)

    content: List[AlcoholShopResponseSchema]
    current_page: int
    page_size: int
    total_elements: int
    total_pages: int
