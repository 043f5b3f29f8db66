from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_booking.platform.config.di import Container
from bus_booking.platform.database.unit_of_work import AbstractUnitOfWork
from bus_booking.platform.exception.exceptions import InvalidTransitionError, NotFoundError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.platform.metrics.booking_metrics import metrics
from bus_booking.service.shared_kernel.app.interface.i_activity_recorder import IActivityRecorder
from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction
from bus_booking.service.ticketing.domain.value_object.booking_seat_change import (
    BookingSeatChange,
)


class ApproveBookingUseCase:
    """Approve a pending booking; its seat stays occupied"""

    def __init__(self, *, uow: AbstractUnitOfWork, activity_recorder: IActivityRecorder) -> None:
        self.uow = uow
        self.activity_recorder = activity_recorder

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        activity_recorder: IActivityRecorder = Depends(Provide[Container.activity_recorder]),
    ) -> Self:
        return cls(uow=uow, activity_recorder=activity_recorder)

    @Logger.io
    async def execute(self, *, booking_id: UUID, admin_id: UUID) -> BookingSeatChange:
        async with self.uow:
            booking = await self.uow.booking_command_repo.get_by_id(booking_id=booking_id)
            if not booking:
                raise NotFoundError('Booking not found')

            approved = booking.approve()
            stored = await self.uow.booking_command_repo.update_status(
                booking=approved, expected_status=booking.status
            )
            if stored is None:
                # Status moved between the read and the compare-and-set
                raise InvalidTransitionError('Booking was modified concurrently, reload it')

            seat = await self.uow.seat_command_repo.get(seat_number=stored.seat_number)
            await self.uow.commit()

        metrics.record_transition(transition='approve')
        await self.activity_recorder.record(
            admin_id=admin_id,
            action=ActivityAction.BOOKING_APPROVED,
            description=f'Approved booking for {stored.full_name} (seat {stored.seat_number})',
            metadata={
                'booking_id': str(stored.id),
                'seat_number': stored.seat_number,
                'previous_status': booking.status.value,
                'new_status': stored.status.value,
            },
        )
        return BookingSeatChange(booking=stored, seat=seat)
