from datetime import datetime, timezone
from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_booking.platform.config.di import Container
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.inventory.app.interface.i_seat_query_repo import ISeatQueryRepo
from bus_booking.service.inventory.domain.seat_export import seats_to_csv
from bus_booking.service.shared_kernel.app.interface.i_activity_recorder import IActivityRecorder
from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction
from bus_booking.service.shared_kernel.domain.value_object.export_file import ExportFile


class ExportSeatsUseCase:
    def __init__(
        self, *, seat_query_repo: ISeatQueryRepo, activity_recorder: IActivityRecorder
    ) -> None:
        self.seat_query_repo = seat_query_repo
        self.activity_recorder = activity_recorder

    @classmethod
    @inject
    def depends(
        cls,
        seat_query_repo: ISeatQueryRepo = Depends(Provide[Container.seat_query_repo]),
        activity_recorder: IActivityRecorder = Depends(Provide[Container.activity_recorder]),
    ) -> Self:
        return cls(seat_query_repo=seat_query_repo, activity_recorder=activity_recorder)

    @Logger.io
    async def execute(self, *, admin_id: UUID) -> ExportFile:
        seats = await self.seat_query_repo.snapshot()
        stamp = datetime.now(timezone.utc).strftime('%Y%m%d_%H%M%S')
        export = ExportFile(
            filename=f'seats_{stamp}.csv',
            content=seats_to_csv(seats),
            record_count=len(seats),
        )

        await self.activity_recorder.record(
            admin_id=admin_id,
            action=ActivityAction.DATA_EXPORTED,
            description=f'Exported {export.record_count} seats to CSV',
            metadata={'filename': export.filename, 'record_count': export.record_count},
        )
        return export
