from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from bus_booking.service.inventory.domain.entity.seat_entity import Seat
from bus_booking.service.shared_kernel.domain.enum.seat_state import SeatState


class SeatResponse(BaseModel):
    seat_number: int
    state: SeatState
    booking_id: Optional[UUID] = None
    passenger_name: Optional[str] = None
    updated_at: Optional[datetime] = None

    model_config = {
        'json_schema_extra': {
            'example': {
                'seat_number': 12,
                'state': 'occupied',
                'booking_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'passenger_name': 'Kofi Asante',
                'updated_at': '2025-01-10T10:30:00Z',
            }
        }
    }

    @classmethod
    def from_entity(cls, seat: Seat) -> 'SeatResponse':
        return cls(
            seat_number=seat.seat_number,
            state=seat.state,
            booking_id=seat.booking_id,
            passenger_name=seat.passenger_name,
            updated_at=seat.updated_at,
        )


class SeatMapResponse(BaseModel):
    capacity: int
    available: int
    occupied: int
    blocked: int
    seats: List[SeatResponse]

    @classmethod
    def from_entities(cls, seats: List[Seat]) -> 'SeatMapResponse':
        return cls(
            capacity=len(seats),
            available=sum(1 for s in seats if s.state == SeatState.AVAILABLE),
            occupied=sum(1 for s in seats if s.state == SeatState.OCCUPIED),
            blocked=sum(1 for s in seats if s.state == SeatState.BLOCKED),
            seats=[SeatResponse.from_entity(s) for s in seats],
        )


class InitializeSeatsRequest(BaseModel):
    capacity: Optional[int] = None  # defaults to SEAT_CAPACITY

    model_config = {'json_schema_extra': {'example': {'capacity': 31}}}


class SetSeatBlockedRequest(BaseModel):
    blocked: bool

    model_config = {'json_schema_extra': {'example': {'blocked': True}}}
