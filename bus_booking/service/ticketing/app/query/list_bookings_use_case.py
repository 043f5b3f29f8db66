from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_booking.platform.config.core_setting import Settings
from bus_booking.platform.config.di import Container
from bus_booking.service.shared_kernel.domain.enum.booking_status import BookingStatus
from bus_booking.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from bus_booking.service.ticketing.app.query.booking_listing import BookingListing


class ListBookingsUseCase:
    def __init__(self, *, booking_query_repo: IBookingQueryRepo, page_size: int) -> None:
        self.booking_query_repo = booking_query_repo
        self.page_size = page_size

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        config_service: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            booking_query_repo=booking_query_repo, page_size=config_service.BOOKING_PAGE_SIZE
        )

    def list_by_status(self, *, status: Optional[BookingStatus] = None) -> BookingListing:
        """Nothing is queried until the listing is iterated"""
        return BookingListing(
            booking_query_repo=self.booking_query_repo, status=status, page_size=self.page_size
        )
