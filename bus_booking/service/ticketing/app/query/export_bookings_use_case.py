from datetime import datetime, timezone
from typing import Optional, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_booking.platform.config.core_setting import Settings
from bus_booking.platform.config.di import Container
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.shared_kernel.app.interface.i_activity_recorder import IActivityRecorder
from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction
from bus_booking.service.shared_kernel.domain.enum.booking_status import BookingStatus
from bus_booking.service.shared_kernel.domain.value_object.export_file import ExportFile
from bus_booking.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from bus_booking.service.ticketing.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from bus_booking.service.ticketing.app.query.booking_listing import BookingListing
from bus_booking.service.ticketing.domain.booking_export import bookings_to_csv


class ExportBookingsUseCase:
    """
    Booking CSV export

    Pickup point and destination ids are resolved to names, inactive entries
    included, so old bookings still show where they were going.
    """

    def __init__(
        self,
        *,
        booking_query_repo: IBookingQueryRepo,
        catalog_query_repo: ICatalogQueryRepo,
        activity_recorder: IActivityRecorder,
        page_size: int,
    ) -> None:
        self.booking_query_repo = booking_query_repo
        self.catalog_query_repo = catalog_query_repo
        self.activity_recorder = activity_recorder
        self.page_size = page_size

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        catalog_query_repo: ICatalogQueryRepo = Depends(Provide[Container.catalog_query_repo]),
        activity_recorder: IActivityRecorder = Depends(Provide[Container.activity_recorder]),
        config_service: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            booking_query_repo=booking_query_repo,
            catalog_query_repo=catalog_query_repo,
            activity_recorder=activity_recorder,
            page_size=config_service.BOOKING_PAGE_SIZE,
        )

    @Logger.io
    async def execute(
        self, *, admin_id: UUID, status: Optional[BookingStatus] = None
    ) -> ExportFile:
        bookings = await BookingListing(
            booking_query_repo=self.booking_query_repo, status=status, page_size=self.page_size
        ).to_list()
        pickup_points = await self.catalog_query_repo.list_pickup_points(include_inactive=True)
        destinations = await self.catalog_query_repo.list_destinations(include_inactive=True)

        content = bookings_to_csv(
            bookings,
            pickup_names={p.id: p.name for p in pickup_points},
            destination_names={d.id: d.name for d in destinations},
        )
        stamp = datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')
        export = ExportFile(
            filename=f'bookings_{status.value if status else "all"}_{stamp}.csv',
            content=content,
            record_count=len(bookings),
        )

        await self.activity_recorder.record(
            admin_id=admin_id,
            action=ActivityAction.DATA_EXPORTED,
            description=f'Exported {export.record_count} bookings to CSV',
            metadata={'filename': export.filename, 'record_count': export.record_count},
        )
        return export
