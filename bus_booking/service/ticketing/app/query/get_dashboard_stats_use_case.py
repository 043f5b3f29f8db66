from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_booking.platform.config.core_setting import Settings
from bus_booking.platform.config.di import Container
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.inventory.app.interface.i_seat_query_repo import ISeatQueryRepo
from bus_booking.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from bus_booking.service.ticketing.app.query.booking_listing import BookingListing
from bus_booking.service.ticketing.domain.booking_stats import (
    DashboardStats,
    compute_dashboard_stats,
)


class GetDashboardStatsUseCase:
    def __init__(
        self,
        *,
        booking_query_repo: IBookingQueryRepo,
        seat_query_repo: ISeatQueryRepo,
        page_size: int,
    ) -> None:
        self.booking_query_repo = booking_query_repo
        self.seat_query_repo = seat_query_repo
        self.page_size = page_size

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        seat_query_repo: ISeatQueryRepo = Depends(Provide[Container.seat_query_repo]),
        config_service: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            booking_query_repo=booking_query_repo,
            seat_query_repo=seat_query_repo,
            page_size=config_service.BOOKING_PAGE_SIZE,
        )

    @Logger.io
    async def execute(self) -> DashboardStats:
        bookings = await BookingListing(
            booking_query_repo=self.booking_query_repo, page_size=self.page_size
        ).to_list()
        seats = await self.seat_query_repo.snapshot()
        return compute_dashboard_stats(bookings, seats)
