"""
Seat Command Repository Implementation (Seat Registry)

Every state change is a single conditional UPDATE guarded by the current
state, so correctness never depends on a prior read.
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from bus_booking.platform.database.column_type import utc_now
from bus_booking.platform.exception.exceptions import InvalidSeatError, SeatUnavailableError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.inventory.app.interface.i_seat_command_repo import ISeatCommandRepo
from bus_booking.service.inventory.domain.entity.seat_entity import Seat
from bus_booking.service.inventory.driven_adapter.model.seat_model import SeatModel
from bus_booking.service.shared_kernel.domain.enum.seat_state import SeatState


class SeatCommandRepoImpl(ISeatCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _model_to_entity(seat_model: SeatModel) -> Seat:
        return Seat(
            seat_number=seat_model.seat_number,
            state=SeatState(seat_model.state),
            booking_id=seat_model.booking_id,
            passenger_name=seat_model.passenger_name,
            updated_at=seat_model.updated_at,
        )

    async def _conditional_update(
        self, seat_number: int, *guard: Any, values: dict[str, Any]
    ) -> Optional[Seat]:
        stmt = (
            update(SeatModel)
            .where(SeatModel.seat_number == seat_number, *guard)
            .values(**values, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:  # type: ignore[attr-defined]
            return None
        return await self.get(seat_number=seat_number)

    @Logger.io
    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(SeatModel))
        return result.scalar_one()

    @Logger.io
    async def get(self, *, seat_number: int) -> Optional[Seat]:
        result = await self.session.execute(
            select(SeatModel)
            .where(SeatModel.seat_number == seat_number)
            .execution_options(populate_existing=True)
        )
        seat_model = result.scalar_one_or_none()
        return self._model_to_entity(seat_model) if seat_model else None

    @Logger.io
    async def insert_missing(self, *, seats: list[Seat]) -> None:
        if not seats:
            return
        rows = [
            {
                'seat_number': seat.seat_number,
                'state': seat.state.value,
                'booking_id': seat.booking_id,
                'passenger_name': seat.passenger_name,
                'updated_at': seat.updated_at or utc_now(),
            }
            for seat in seats
        ]
        dialect = self.session.get_bind().dialect.name
        if dialect == 'postgresql':
            stmt = postgresql.insert(SeatModel).values(rows).on_conflict_do_nothing()
        elif dialect == 'sqlite':
            stmt = sqlite.insert(SeatModel).values(rows).on_conflict_do_nothing()
        else:
            raise NotImplementedError(f'Unsupported dialect for seat initialization: {dialect}')
        await self.session.execute(stmt)

    @Logger.io
    async def mark_occupied(
        self, *, seat_number: int, booking_id: UUID, passenger_name: str
    ) -> Seat:
        seat = await self._conditional_update(
            seat_number,
            SeatModel.state == SeatState.AVAILABLE.value,
            values={
                'state': SeatState.OCCUPIED.value,
                'booking_id': booking_id,
                'passenger_name': passenger_name,
            },
        )
        if seat is not None:
            return seat

        if await self.get(seat_number=seat_number) is None:
            raise InvalidSeatError(seat_number)
        raise SeatUnavailableError(seat_number)

    @Logger.io
    async def release(self, *, seat_number: int, booking_id: Optional[UUID] = None) -> Seat:
        if booking_id is not None:
            guard = (
                SeatModel.state == SeatState.OCCUPIED.value,
                SeatModel.booking_id == booking_id,
            )
        else:
            guard = (SeatModel.state != SeatState.AVAILABLE.value,)

        seat = await self._conditional_update(
            seat_number,
            *guard,
            values={'state': SeatState.AVAILABLE.value, 'booking_id': None, 'passenger_name': None},
        )
        if seat is not None:
            return seat

        # Nothing to release: already available, or held by another booking
        current = await self.get(seat_number=seat_number)
        if current is None:
            raise InvalidSeatError(seat_number)
        return current

    @Logger.io
    async def set_state(
        self, *, seat_number: int, expected: SeatState, new: SeatState
    ) -> Optional[Seat]:
        return await self._conditional_update(
            seat_number,
            SeatModel.state == expected.value,
            values={'state': new.value},
        )
