from typing import AsyncContextManager, Callable, List, Optional
from uuid import UUID

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.shared_kernel.domain.enum.booking_status import BookingStatus
from bus_booking.service.ticketing.app.interface.i_booking_query_repo import (
    BookingCursor,
    IBookingQueryRepo,
)
from bus_booking.service.ticketing.domain.entity.booking_entity import Booking
from bus_booking.service.ticketing.driven_adapter.model.booking_model import BookingModel
from bus_booking.service.ticketing.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        async with self.session_factory() as session:
            result = await session.execute(select(BookingModel).where(BookingModel.id == booking_id))
            booking_model = result.scalar_one_or_none()
            return BookingCommandRepoImpl._model_to_entity(booking_model) if booking_model else None

    @Logger.io
    async def list_page(
        self,
        *,
        status: Optional[BookingStatus],
        after: Optional[BookingCursor],
        limit: int,
    ) -> List[Booking]:
        stmt = select(BookingModel)
        if status is not None:
            stmt = stmt.where(BookingModel.status == status.value)
        if after is not None:
            created_at, booking_id = after
            stmt = stmt.where(
                or_(
                    BookingModel.created_at < created_at,
                    and_(BookingModel.created_at == created_at, BookingModel.id < booking_id),
                )
            )
        stmt = stmt.order_by(BookingModel.created_at.desc(), BookingModel.id.desc()).limit(limit)

        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [BookingCommandRepoImpl._model_to_entity(row) for row in result.scalars()]
