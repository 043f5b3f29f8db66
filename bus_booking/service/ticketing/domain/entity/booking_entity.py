from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID

import attrs
from email_validator import EmailNotValidError, validate_email

from bus_booking.platform.exception.exceptions import InvalidTransitionError, ValidationError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.shared_kernel.domain.enum.booking_status import BookingStatus
from bus_booking.service.shared_kernel.domain.enum.payment_status import PaymentStatus


DEFAULT_BUS_TYPE = 'Economical'


def _require_text(field_name: str, value: Optional[str]) -> str:
    text = (value or '').strip()
    if not text:
        raise ValidationError(f'{field_name} is required')
    return text


@attrs.define
class Booking:
    id: UUID
    full_name: str
    email: str
    phone: str
    contact_person_name: str
    contact_person_phone: str
    passenger_class: str
    pickup_point_id: UUID
    destination_id: UUID
    departure_date: date
    seat_number: int
    amount: Decimal
    bus_type: str = DEFAULT_BUS_TYPE
    referral: Optional[str] = None
    status: BookingStatus = BookingStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_reference: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        id: UUID,
        full_name: str,
        email: str,
        phone: str,
        contact_person_name: str,
        contact_person_phone: str,
        passenger_class: str,
        pickup_point_id: UUID,
        destination_id: UUID,
        departure_date: date,
        seat_number: int,
        amount: Decimal,
        seat_capacity: int,
        bus_type: Optional[str] = None,
        referral: Optional[str] = None,
        today: Optional[date] = None,
    ) -> 'Booking':
        """
        Validate a booking request and build the new pending booking

        Raises:
            ValidationError: missing or malformed field, seat out of range,
                non-positive amount or departure date in the past
        """
        email = _require_text('email', email)
        try:
            email = validate_email(email, check_deliverability=False).normalized
        except EmailNotValidError as e:
            raise ValidationError(f'email is not a valid address: {e}') from e

        if not 1 <= seat_number <= seat_capacity:
            raise ValidationError(f'seat_number must be between 1 and {seat_capacity}')

        if amount is None or Decimal(amount) <= 0:
            raise ValidationError('amount must be greater than 0')

        today = today or datetime.now(timezone.utc).date()
        if departure_date < today:
            raise ValidationError('departure_date cannot be in the past')

        now = datetime.now(timezone.utc)
        return cls(
            id=id,
            full_name=_require_text('full_name', full_name),
            email=email,
            phone=_require_text('phone', phone),
            contact_person_name=_require_text('contact_person_name', contact_person_name),
            contact_person_phone=_require_text('contact_person_phone', contact_person_phone),
            passenger_class=_require_text('passenger_class', passenger_class),
            bus_type=(bus_type or '').strip() or DEFAULT_BUS_TYPE,
            referral=(referral or '').strip() or None,
            pickup_point_id=pickup_point_id,
            destination_id=destination_id,
            departure_date=departure_date,
            seat_number=seat_number,
            amount=Decimal(amount).quantize(Decimal('0.01')),
            status=BookingStatus.PENDING,
            payment_status=PaymentStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_active(self) -> bool:
        """A booking holds its seat until it is cancelled"""
        return self.status != BookingStatus.CANCELLED

    @Logger.io
    def approve(self) -> 'Booking':
        """
        Approve a pending booking (the seat stays occupied)

        Raises:
            InvalidTransitionError: booking is not pending
        """
        if self.status != BookingStatus.PENDING:
            raise InvalidTransitionError(f'Cannot approve a booking that is {self.status}')

        return attrs.evolve(
            self, status=BookingStatus.APPROVED, updated_at=datetime.now(timezone.utc)
        )

    @Logger.io
    def cancel(self) -> 'Booking':
        """
        Cancel (reject) a pending or approved booking

        Raises:
            InvalidTransitionError: booking is already cancelled
        """
        if self.status == BookingStatus.CANCELLED:
            raise InvalidTransitionError('Booking already cancelled')

        return attrs.evolve(
            self, status=BookingStatus.CANCELLED, updated_at=datetime.now(timezone.utc)
        )

    @Logger.io
    def confirm_payment(self, *, reference: str) -> 'Booking':
        if self.payment_status == PaymentStatus.COMPLETED:
            return self

        return attrs.evolve(
            self,
            payment_status=PaymentStatus.COMPLETED,
            payment_reference=_require_text('reference', reference),
            updated_at=datetime.now(timezone.utc),
        )
