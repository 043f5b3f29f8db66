"""
Booking Command Repository Interface (Booking Ledger)

Bound to the session of a unit of work, next to the seat command repository,
so seat and booking changes commit together.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from bus_booking.service.shared_kernel.domain.enum.booking_status import BookingStatus
from bus_booking.service.ticketing.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        """
        Insert a new booking

        Raises:
            SeatConflictError: another non-cancelled booking already references the seat
        """
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        pass

    @abstractmethod
    async def update_status(
        self, *, booking: Booking, expected_status: BookingStatus
    ) -> Optional[Booking]:
        """
        Compare-and-set the booking status

        Returns:
            The stored booking, or None when its status is no longer `expected_status`
        """
        pass

    @abstractmethod
    async def update_payment(self, *, booking: Booking) -> Optional[Booking]:
        """
        Record a completed payment on a booking whose payment is still pending

        Returns:
            The stored booking, or None when the payment was already recorded
        """
        pass

    @abstractmethod
    async def delete(self, *, booking_id: UUID) -> bool:
        """Returns False when no row was deleted"""
        pass
