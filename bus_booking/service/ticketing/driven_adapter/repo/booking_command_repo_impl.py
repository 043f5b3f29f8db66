"""
Booking Command Repository Implementation (Booking Ledger)

Responsibilities:
- Insert new bookings inside the booking unit of work
- Status transitions as compare-and-set updates on (id, status)
- Payment confirmation and administrative delete
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bus_booking.platform.exception.exceptions import SeatConflictError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.shared_kernel.domain.enum.booking_status import BookingStatus
from bus_booking.service.shared_kernel.domain.enum.payment_status import PaymentStatus
from bus_booking.service.ticketing.app.interface.i_booking_command_repo import (
    IBookingCommandRepo,
)
from bus_booking.service.ticketing.domain.entity.booking_entity import Booking
from bus_booking.service.ticketing.driven_adapter.model.booking_model import BookingModel


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _model_to_entity(booking_model: BookingModel) -> Booking:
        return Booking(
            id=booking_model.id,
            full_name=booking_model.full_name,
            email=booking_model.email,
            phone=booking_model.phone,
            contact_person_name=booking_model.contact_person_name,
            contact_person_phone=booking_model.contact_person_phone,
            passenger_class=booking_model.passenger_class,
            bus_type=booking_model.bus_type,
            referral=booking_model.referral,
            pickup_point_id=booking_model.pickup_point_id,
            destination_id=booking_model.destination_id,
            departure_date=booking_model.departure_date,
            seat_number=booking_model.seat_number,
            amount=booking_model.amount,
            status=BookingStatus(booking_model.status),
            payment_status=PaymentStatus(booking_model.payment_status),
            payment_reference=booking_model.payment_reference,
            created_at=booking_model.created_at,
            updated_at=booking_model.updated_at,
        )

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        booking_model = BookingModel(
            id=booking.id,
            full_name=booking.full_name,
            email=booking.email,
            phone=booking.phone,
            contact_person_name=booking.contact_person_name,
            contact_person_phone=booking.contact_person_phone,
            passenger_class=booking.passenger_class,
            bus_type=booking.bus_type,
            referral=booking.referral,
            pickup_point_id=booking.pickup_point_id,
            destination_id=booking.destination_id,
            departure_date=booking.departure_date,
            seat_number=booking.seat_number,
            amount=booking.amount,
            status=booking.status.value,
            payment_status=booking.payment_status.value,
            payment_reference=booking.payment_reference,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )
        self.session.add(booking_model)
        try:
            await self.session.flush()
        except IntegrityError as e:
            if 'uq_booking_active_seat' in str(e) or 'booking.seat_number' in str(e):
                raise SeatConflictError(
                    f'Seat {booking.seat_number} already has an active booking'
                ) from e
            raise

        return self._model_to_entity(booking_model)

    @Logger.io
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        result = await self.session.execute(
            select(BookingModel)
            .where(BookingModel.id == booking_id)
            .execution_options(populate_existing=True)
        )
        booking_model = result.scalar_one_or_none()
        return self._model_to_entity(booking_model) if booking_model else None

    @Logger.io
    async def update_status(
        self, *, booking: Booking, expected_status: BookingStatus
    ) -> Optional[Booking]:
        result = await self.session.execute(
            update(BookingModel)
            .where(BookingModel.id == booking.id, BookingModel.status == expected_status.value)
            .values(status=booking.status.value, updated_at=booking.updated_at)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:  # type: ignore[attr-defined]
            return None
        return await self.get_by_id(booking_id=booking.id)

    @Logger.io
    async def update_payment(self, *, booking: Booking) -> Optional[Booking]:
        result = await self.session.execute(
            update(BookingModel)
            .where(
                BookingModel.id == booking.id,
                BookingModel.payment_status == PaymentStatus.PENDING.value,
            )
            .values(
                payment_status=booking.payment_status.value,
                payment_reference=booking.payment_reference,
                updated_at=booking.updated_at,
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:  # type: ignore[attr-defined]
            return None
        return await self.get_by_id(booking_id=booking.id)

    @Logger.io
    async def delete(self, *, booking_id: UUID) -> bool:
        result = await self.session.execute(
            delete(BookingModel)
            .where(BookingModel.id == booking_id)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0  # type: ignore[attr-defined]
