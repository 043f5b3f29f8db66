from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_booking.platform.config.di import Container
from bus_booking.platform.database.unit_of_work import AbstractUnitOfWork
from bus_booking.platform.exception.exceptions import InvalidSeatError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.platform.metrics.booking_metrics import metrics
from bus_booking.service.inventory.domain.entity.seat_entity import Seat
from bus_booking.service.shared_kernel.app.interface.i_activity_recorder import IActivityRecorder
from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction
from bus_booking.service.shared_kernel.domain.enum.seat_state import SeatState


class SetSeatBlockedUseCase:
    """
    Administrative seat toggle.

    Blocking only applies to an available seat and unblocking only to a blocked
    one; both are a single compare-and-set on the seat state. Blocking a seat
    held by a booking fails with SeatOccupiedError. Any other combination
    (block a blocked seat, unblock an available or occupied seat) is a no-op
    and is not recorded in the activity log.
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
    async def execute(self, *, seat_number: int, blocked: bool, admin_id: UUID) -> Seat:
        if blocked:
            expected, target = SeatState.AVAILABLE, SeatState.BLOCKED
        else:
            expected, target = SeatState.BLOCKED, SeatState.AVAILABLE

        async with self.uow:
            seat = await self.uow.seat_command_repo.set_state(
                seat_number=seat_number, expected=expected, new=target
            )
            if seat is None:
                current = await self.uow.seat_command_repo.get(seat_number=seat_number)
                if current is None:
                    raise InvalidSeatError(seat_number)
                if blocked:
                    current.validate_can_block()
                Logger.base.info(
                    f'💺 [SEAT-TOGGLE] Seat {seat_number} already {current.state}, nothing to do'
                )
                return current
            await self.uow.commit()

        metrics.record_seat_state_change(state=target.value)
        verb = 'Blocked' if blocked else 'Unblocked'
        await self.activity_recorder.record(
            admin_id=admin_id,
            action=ActivityAction.SEAT_BLOCKED if blocked else ActivityAction.SEAT_UNBLOCKED,
            description=f'{verb} seat {seat_number}',
            metadata={
                'seat_number': seat_number,
                'previous_state': expected.value,
                'new_state': target.value,
            },
        )
        return seat
