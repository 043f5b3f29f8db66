from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_booking.platform.config.di import Container
from bus_booking.platform.database.unit_of_work import AbstractUnitOfWork
from bus_booking.platform.exception.exceptions import NotFoundError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.platform.metrics.booking_metrics import metrics
from bus_booking.service.shared_kernel.app.interface.i_activity_recorder import IActivityRecorder
from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction
from bus_booking.service.ticketing.domain.value_object.booking_seat_change import (
    BookingSeatChange,
)


class DeleteBookingUseCase:
    """
    Remove a booking record for good.

    An active booking releases its seat in the same unit of work. A cancelled
    booking already gave its seat back, so only the record goes away.
    Returns the booking as it was before removal and the seat afterwards.
    """

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

            if booking.is_active:
                seat = await self.uow.seat_command_repo.release(
                    seat_number=booking.seat_number, booking_id=booking.id
                )
            else:
                seat = await self.uow.seat_command_repo.get(seat_number=booking.seat_number)

            if not await self.uow.booking_command_repo.delete(booking_id=booking.id):
                raise NotFoundError('Booking not found')
            await self.uow.commit()

        metrics.record_transition(transition='delete')
        await self.activity_recorder.record(
            admin_id=admin_id,
            action=ActivityAction.BOOKING_DELETED,
            description=f'Deleted booking for {booking.full_name} (seat {booking.seat_number})',
            metadata={
                'booking_id': str(booking.id),
                'seat_number': booking.seat_number,
                'previous_status': booking.status.value,
                'new_status': 'deleted',
            },
        )
        return BookingSeatChange(booking=booking, seat=seat)
