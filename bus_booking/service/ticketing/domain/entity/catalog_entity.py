"""Pickup points and destinations offered to passengers"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID

import attrs

from bus_booking.platform.exception.exceptions import ValidationError


def _clean_name(name: Optional[str]) -> str:
    cleaned = ' '.join((name or '').split())
    if not cleaned:
        raise ValidationError('name is required')
    return cleaned


def _validate_price(price: Decimal) -> Decimal:
    if price is None or Decimal(price) <= 0:
        raise ValidationError('price must be greater than 0')
    return Decimal(price).quantize(Decimal('0.01'))


@attrs.define
class PickupPoint:
    id: UUID
    name: str
    active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(cls, *, id: UUID, name: str) -> 'PickupPoint':
        now = datetime.now(timezone.utc)
        return cls(id=id, name=_clean_name(name), created_at=now, updated_at=now)

    def rename(self, *, name: str) -> 'PickupPoint':
        return attrs.evolve(self, name=_clean_name(name), updated_at=datetime.now(timezone.utc))

    def deactivate(self) -> 'PickupPoint':
        return attrs.evolve(self, active=False, updated_at=datetime.now(timezone.utc))


@attrs.define
class Destination:
    id: UUID
    name: str
    price: Decimal
    active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(cls, *, id: UUID, name: str, price: Decimal) -> 'Destination':
        now = datetime.now(timezone.utc)
        return cls(
            id=id,
            name=_clean_name(name),
            price=_validate_price(price),
            created_at=now,
            updated_at=now,
        )

    def update(self, *, name: Optional[str] = None, price: Optional[Decimal] = None) -> 'Destination':
        """Fare changes only apply to bookings created afterwards"""
        return attrs.evolve(
            self,
            name=self.name if name is None else _clean_name(name),
            price=self.price if price is None else _validate_price(price),
            updated_at=datetime.now(timezone.utc),
        )

    def deactivate(self) -> 'Destination':
        return attrs.evolve(self, active=False, updated_at=datetime.now(timezone.utc))
