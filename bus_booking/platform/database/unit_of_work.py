"""
Unit of Work Pattern - one database transaction shared by the command repositories

Architecture:
- UoW owns the session lifecycle and commit/rollback
- Seat and booking command repositories are bound to the UoW's session
- Use cases coordinate the Seat Registry and the Booking Ledger inside one UoW,
  so a seat change and its booking change commit or roll back together
"""

from __future__ import annotations

import abc
from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Callable, Optional

from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from bus_booking.platform.exception.exceptions import StoreUnavailableError
from bus_booking.platform.logging.loguru_io import Logger


if TYPE_CHECKING:
    from bus_booking.service.inventory.app.interface.i_seat_command_repo import ISeatCommandRepo
    from bus_booking.service.ticketing.app.interface.i_booking_command_repo import (
        IBookingCommandRepo,
    )


def is_transient_db_error(exc: BaseException) -> bool:
    if isinstance(exc, (OperationalError, InterfaceError)):
        return True
    return isinstance(exc, DBAPIError) and exc.connection_invalidated


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work

    Usage:
        async with uow:
            seat = await uow.seat_command_repo.mark_occupied(...)
            booking = await uow.booking_command_repo.create(booking=...)
            await uow.commit()

    Leaving the block without commit() rolls everything back.
    """

    seat_command_repo: ISeatCommandRepo
    booking_command_repo: IBookingCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    Opens a fresh session on every `async with`, so one instance may run several
    transactions in sequence. Connection-level failures surface as StoreUnavailableError.
    """

    def __init__(
        self, session_factory: Callable[..., AbstractAsyncContextManager[AsyncSession]]
    ) -> None:
        self.session_factory = session_factory
        self._session_cm: Optional[AbstractAsyncContextManager[AsyncSession]] = None
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from bus_booking.service.inventory.driven_adapter.repo.seat_command_repo_impl import (
            SeatCommandRepoImpl,
        )
        from bus_booking.service.ticketing.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )

        self._session_cm = self.session_factory()
        self.session = await self._session_cm.__aenter__()

        self.seat_command_repo = SeatCommandRepoImpl(session=self.session)
        self.booking_command_repo = BookingCommandRepoImpl(session=self.session)

        await super().__aenter__()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            await super().__aexit__(exc_type, exc, tb)
        finally:
            session_cm, self._session_cm, self.session = self._session_cm, None, None
            if session_cm is not None:
                await session_cm.__aexit__(None, None, None)

        if exc is not None and is_transient_db_error(exc):
            Logger.base.error(f'🔌 [UOW] Store unavailable, transaction rolled back: {exc}')
            raise StoreUnavailableError() from exc

    async def _commit(self) -> None:
        if self.session is None:
            raise RuntimeError('commit() called outside of `async with uow`')
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is None:
            return
        try:
            await self.session.rollback()
        except Exception as e:
            if not is_transient_db_error(e):
                raise
            Logger.base.warning(f'🔌 [UOW] Rollback on a broken connection: {e}')
