from datetime import datetime, timezone
from typing import List, Optional, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_booking.platform.config.di import Container
from bus_booking.platform.database.unit_of_work import AbstractUnitOfWork
from bus_booking.platform.exception.exceptions import AlreadyInitializedError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.inventory.app.interface.i_seat_query_repo import ISeatQueryRepo
from bus_booking.service.inventory.domain.entity.seat_entity import Seat
from bus_booking.service.shared_kernel.app.interface.i_activity_recorder import IActivityRecorder
from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction


class InitializeSeatsUseCase:
    """
    Create the fixed seat set of the bus.

    Idempotent: an empty registry gets seats 1..capacity, all available; a
    registry that already holds `capacity` seats is left untouched. The
    registry is never resized, so any other existing count is an error.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        seat_query_repo: ISeatQueryRepo,
        activity_recorder: IActivityRecorder,
    ) -> None:
        self.uow = uow
        self.seat_query_repo = seat_query_repo
        self.activity_recorder = activity_recorder

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        seat_query_repo: ISeatQueryRepo = Depends(Provide[Container.seat_query_repo]),
        activity_recorder: IActivityRecorder = Depends(Provide[Container.activity_recorder]),
    ) -> Self:
        return cls(uow=uow, seat_query_repo=seat_query_repo, activity_recorder=activity_recorder)

    @Logger.io
    async def execute(self, *, capacity: int, admin_id: Optional[UUID] = None) -> List[Seat]:
        created = False
        async with self.uow:
            existing = await self.uow.seat_command_repo.count()
            if existing and existing != capacity:
                raise AlreadyInitializedError(existing=existing, requested=capacity)

            if not existing:
                seats = Seat.build_registry(capacity=capacity, now=datetime.now(timezone.utc))
                await self.uow.seat_command_repo.insert_missing(seats=seats)
                await self.uow.commit()
                created = True

        if created:
            Logger.base.info(f'💺 [INIT-SEATS] Seat registry initialized with {capacity} seats')
            if admin_id is not None:
                await self.activity_recorder.record(
                    admin_id=admin_id,
                    action=ActivityAction.SEATS_INITIALIZED,
                    description=f'Initialized seat registry with {capacity} seats',
                    metadata={'capacity': capacity},
                )

        return await self.seat_query_repo.snapshot()
