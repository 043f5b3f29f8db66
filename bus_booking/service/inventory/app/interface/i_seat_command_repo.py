"""
Seat Command Repository Interface (Seat Registry)

Bound to the session of a unit of work: nothing is visible to other
transactions until the unit of work commits.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from bus_booking.service.inventory.domain.entity.seat_entity import Seat
from bus_booking.service.shared_kernel.domain.enum.seat_state import SeatState


class ISeatCommandRepo(ABC):
    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def get(self, *, seat_number: int) -> Optional[Seat]:
        pass

    @abstractmethod
    async def insert_missing(self, *, seats: list[Seat]) -> None:
        """
        Insert seats, silently skipping seat numbers that already exist

        Safe to run from several workers at startup at the same time.
        """
        pass

    @abstractmethod
    async def mark_occupied(
        self, *, seat_number: int, booking_id: UUID, passenger_name: str
    ) -> Seat:
        """
        Occupy an available seat with a single conditional update

        The update only matches a seat whose state is still `available`, so of
        several concurrent callers for one seat exactly one gets a row back.

        Raises:
            InvalidSeatError: seat does not exist
            SeatUnavailableError: seat is occupied or blocked
        """
        pass

    @abstractmethod
    async def release(self, *, seat_number: int, booking_id: Optional[UUID] = None) -> Seat:
        """
        Make a seat available again and clear its booking reference

        Idempotent: releasing an available seat is a no-op. When `booking_id` is
        given, the seat is only released while that booking holds it.

        Raises:
            InvalidSeatError: seat does not exist
        """
        pass

    @abstractmethod
    async def set_state(
        self, *, seat_number: int, expected: SeatState, new: SeatState
    ) -> Optional[Seat]:
        """
        Compare-and-set the seat state

        Returns:
            The updated seat, or None when the seat was not in `expected` state
        """
        pass
