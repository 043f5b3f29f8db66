from datetime import datetime
from typing import Optional
from uuid import UUID

import attrs

from bus_booking.platform.exception.exceptions import SeatOccupiedError, ValidationError
from bus_booking.service.shared_kernel.domain.enum.seat_state import SeatState


@attrs.define
class Seat:
    seat_number: int
    state: SeatState = SeatState.AVAILABLE
    booking_id: Optional[UUID] = None
    passenger_name: Optional[str] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def build_registry(cls, *, capacity: int, now: datetime) -> list['Seat']:
        """All seats of a fresh registry, numbered 1..capacity and available"""
        if capacity < 1:
            raise ValidationError('capacity must be at least 1')
        return [cls(seat_number=n, updated_at=now) for n in range(1, capacity + 1)]

    def validate_can_block(self) -> None:
        """
        Blocking is refused while a booking holds the seat

        Raises:
            SeatOccupiedError: the seat must be released (cancel/delete the booking) first
        """
        if self.state == SeatState.OCCUPIED:
            raise SeatOccupiedError(self.seat_number)
