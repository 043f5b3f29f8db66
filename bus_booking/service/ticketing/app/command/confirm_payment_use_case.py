from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_booking.platform.config.di import Container
from bus_booking.platform.database.unit_of_work import AbstractUnitOfWork
from bus_booking.platform.exception.exceptions import NotFoundError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.platform.metrics.booking_metrics import metrics
from bus_booking.service.shared_kernel.domain.enum.payment_status import PaymentStatus
from bus_booking.service.ticketing.domain.entity.booking_entity import Booking


class ConfirmPaymentUseCase:
    """
    Payment provider callback.

    A successful payment marks the booking paid and keeps the provider
    reference; repeating the callback changes nothing. A failed or cancelled
    payment leaves the booking as it is. Booking status is never touched here.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, booking_id: UUID, reference: str, success: bool) -> Booking:
        async with self.uow:
            booking = await self.uow.booking_command_repo.get_by_id(booking_id=booking_id)
            if not booking:
                raise NotFoundError('Booking not found')

            if not success:
                metrics.record_payment_callback(result='failed')
                Logger.base.warning(
                    f'💳 [PAYMENT] Payment {reference} for booking {booking_id} did not succeed'
                )
                return booking

            paid = None
            if booking.payment_status == PaymentStatus.PENDING:
                # Guarded on a pending payment, so only the first success is stored
                paid = await self.uow.booking_command_repo.update_payment(
                    booking=booking.confirm_payment(reference=reference)
                )

            if paid is None:
                stored = await self.uow.booking_command_repo.get_by_id(booking_id=booking_id)
                if not stored:
                    raise NotFoundError('Booking not found')
                metrics.record_payment_callback(result='duplicate')
                Logger.base.info(f'💳 [PAYMENT] Booking {booking_id} already paid, ignoring')
                return stored

            await self.uow.commit()

        metrics.record_payment_callback(result='completed')
        Logger.base.info(f'💳 [PAYMENT] Booking {booking_id} paid, reference {reference}')
        return paid
