from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Tuple
from uuid import UUID

from bus_booking.service.shared_kernel.domain.enum.booking_status import BookingStatus
from bus_booking.service.ticketing.domain.entity.booking_entity import Booking


# (created_at, id) of the last booking of the previous page
BookingCursor = Tuple[datetime, UUID]


class IBookingQueryRepo(ABC):
    """Repository interface for booking read operations"""

    @abstractmethod
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        pass

    @abstractmethod
    async def list_page(
        self,
        *,
        status: Optional[BookingStatus],
        after: Optional[BookingCursor],
        limit: int,
    ) -> List[Booking]:
        """
        One page of bookings, newest first (created_at desc, id desc)

        Args:
            status: only bookings in this status, or all when None
            after: keyset cursor; the page starts strictly after it
            limit: maximum page size
        """
        pass
