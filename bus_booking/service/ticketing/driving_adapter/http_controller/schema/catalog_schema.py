from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from bus_booking.service.ticketing.domain.entity.catalog_entity import Destination, PickupPoint


class PickupPointRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)

    model_config = {'json_schema_extra': {'example': {'name': 'Kwesimintsim'}}}


class PickupPointResponse(BaseModel):
    id: UUID
    name: str
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, pickup_point: PickupPoint) -> 'PickupPointResponse':
        return cls(
            id=pickup_point.id,
            name=pickup_point.name,
            active=pickup_point.active,
            created_at=pickup_point.created_at,
            updated_at=pickup_point.updated_at,
        )


class DestinationCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)

    model_config = {'json_schema_extra': {'example': {'name': 'Accra', 'price': '40.00'}}}


class DestinationUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)

    model_config = {'json_schema_extra': {'example': {'price': '45.00'}}}


class DestinationResponse(BaseModel):
    id: UUID
    name: str
    price: Decimal
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, destination: Destination) -> 'DestinationResponse':
        return cls(
            id=destination.id,
            name=destination.name,
            price=destination.price,
            active=destination.active,
            created_at=destination.created_at,
            updated_at=destination.updated_at,
        )
