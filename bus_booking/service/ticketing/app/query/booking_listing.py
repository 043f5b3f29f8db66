from typing import AsyncIterator, List, Optional

from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.shared_kernel.domain.enum.booking_status import BookingStatus
from bus_booking.service.ticketing.app.interface.i_booking_query_repo import (
    BookingCursor,
    IBookingQueryRepo,
)
from bus_booking.service.ticketing.domain.entity.booking_entity import Booking


class BookingListing:
    """
    Lazily evaluated booking listing, newest first.

    Nothing is fetched until iteration starts. Each `async for` re-runs the
    query from the first page, so the listing can be iterated again after a
    mutation to see the new state. Pages are fetched with a keyset cursor on
    (created_at, id), so bookings inserted mid-iteration never shift a page.
    """

    def __init__(
        self,
        *,
        booking_query_repo: IBookingQueryRepo,
        status: Optional[BookingStatus] = None,
        page_size: int = 50,
    ) -> None:
        if page_size < 1:
            raise ValueError('page_size must be positive')
        self.booking_query_repo = booking_query_repo
        self.status = status
        self.page_size = page_size

    def __aiter__(self) -> AsyncIterator[Booking]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[Booking]:
        cursor: Optional[BookingCursor] = None
        while True:
            page = await self.booking_query_repo.list_page(
                status=self.status, after=cursor, limit=self.page_size
            )
            for booking in page:
                yield booking
            if len(page) < self.page_size:
                return
            last = page[-1]
            if last.created_at is None:
                raise RuntimeError(f'Booking {last.id} has no created_at, cannot page past it')
            cursor = (last.created_at, last.id)

    @Logger.io
    async def to_list(self) -> List[Booking]:
        return [booking async for booking in self]
