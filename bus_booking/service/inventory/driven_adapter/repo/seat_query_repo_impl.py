from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.inventory.app.interface.i_seat_query_repo import ISeatQueryRepo
from bus_booking.service.inventory.domain.entity.seat_entity import Seat
from bus_booking.service.inventory.driven_adapter.model.seat_model import SeatModel
from bus_booking.service.inventory.driven_adapter.repo.seat_command_repo_impl import (
    SeatCommandRepoImpl,
)


class SeatQueryRepoImpl(ISeatQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io(truncate_content=True)
    async def snapshot(self) -> List[Seat]:
        async with self.session_factory() as session:
            result = await session.execute(select(SeatModel).order_by(SeatModel.seat_number))
            return [SeatCommandRepoImpl._model_to_entity(row) for row in result.scalars()]

    @Logger.io
    async def get(self, *, seat_number: int) -> Optional[Seat]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SeatModel).where(SeatModel.seat_number == seat_number)
            )
            seat_model = result.scalar_one_or_none()
            return SeatCommandRepoImpl._model_to_entity(seat_model) if seat_model else None
