"""
Unit tests for the Booking entity

Covers request validation on create and the status machine:
pending -> approved -> cancelled, pending -> cancelled; cancelled is terminal.
"""

from datetime import date, timedelta
from decimal import Decimal
from typing import Any

import pytest
import uuid_utils.compat as uuid_utils

from bus_booking.platform.exception.exceptions import InvalidTransitionError, ValidationError
from bus_booking.service.shared_kernel.domain.enum.booking_status import BookingStatus
from bus_booking.service.shared_kernel.domain.enum.payment_status import PaymentStatus
from bus_booking.service.ticketing.domain.entity.booking_entity import DEFAULT_BUS_TYPE, Booking


TODAY = date(2025, 2, 1)


@pytest.fixture
def params() -> dict[str, Any]:
    return {
        'id': uuid_utils.uuid7(),
        'full_name': '  Kofi Asante ',
        'email': 'kofi@example.com',
        'phone': '0241234567',
        'contact_person_name': 'Ama Asante',
        'contact_person_phone': '0209876543',
        'passenger_class': 'Level 100',
        'pickup_point_id': uuid_utils.uuid7(),
        'destination_id': uuid_utils.uuid7(),
        'departure_date': TODAY + timedelta(days=3),
        'seat_number': 12,
        'amount': Decimal('40'),
        'seat_capacity': 31,
        'today': TODAY,
    }


@pytest.mark.unit
class TestBookingCreate:
    def test_new_booking_is_pending_and_unpaid(self, params: dict[str, Any]) -> None:
        booking = Booking.create(**params)

        assert booking.status == BookingStatus.PENDING
        assert booking.payment_status == PaymentStatus.PENDING
        assert booking.payment_reference is None
        assert booking.full_name == 'Kofi Asante'
        assert booking.amount == Decimal('40.00')
        assert booking.bus_type == DEFAULT_BUS_TYPE
        assert booking.referral is None
        assert booking.created_at is not None
        assert booking.is_active

    def test_departure_today_is_allowed(self, params: dict[str, Any]) -> None:
        params['departure_date'] = TODAY

        assert Booking.create(**params).departure_date == TODAY

    @pytest.mark.parametrize(
        'field,value,message',
        [
            ('email', 'not-an-email', 'email'),
            ('email', 'kofi@-bad..com', 'email'),
            ('email', 'kofi@example..com', 'email'),
            ('email', '.kofi@example.com', 'email'),
            ('email', '', 'email is required'),
            ('full_name', '   ', 'full_name is required'),
            ('phone', '', 'phone is required'),
            ('passenger_class', '', 'passenger_class is required'),
            ('seat_number', 0, 'seat_number'),
            ('seat_number', 32, 'seat_number'),
            ('amount', Decimal('0'), 'amount'),
            ('departure_date', TODAY - timedelta(days=1), 'past'),
        ],
    )
    def test_invalid_request_is_rejected(
        self, params: dict[str, Any], field: str, value: Any, message: str
    ) -> None:
        params[field] = value

        with pytest.raises(ValidationError, match=message):
            Booking.create(**params)


@pytest.mark.unit
class TestBookingTransitions:
    @pytest.fixture
    def pending(self, params: dict[str, Any]) -> Booking:
        return Booking.create(**params)

    def test_approve_pending(self, pending: Booking) -> None:
        approved = pending.approve()

        assert approved.status == BookingStatus.APPROVED
        assert approved.is_active
        # transitions return a new booking
        assert pending.status == BookingStatus.PENDING

    def test_cancel_pending_and_approved(self, pending: Booking) -> None:
        assert pending.cancel().status == BookingStatus.CANCELLED
        assert pending.approve().cancel().status == BookingStatus.CANCELLED

    def test_cancelled_booking_is_not_active(self, pending: Booking) -> None:
        assert not pending.cancel().is_active

    def test_approve_twice_is_rejected(self, pending: Booking) -> None:
        with pytest.raises(InvalidTransitionError):
            pending.approve().approve()

    def test_cancelled_is_terminal(self, pending: Booking) -> None:
        cancelled = pending.cancel()

        with pytest.raises(InvalidTransitionError):
            cancelled.approve()
        with pytest.raises(InvalidTransitionError, match='already cancelled'):
            cancelled.cancel()


@pytest.mark.unit
class TestBookingPayment:
    def test_confirm_payment_keeps_status(self, params: dict[str, Any]) -> None:
        booking = Booking.create(**params)

        paid = booking.confirm_payment(reference='T123')

        assert paid.payment_status == PaymentStatus.COMPLETED
        assert paid.payment_reference == 'T123'
        assert paid.status == BookingStatus.PENDING

    def test_second_confirmation_keeps_first_reference(self, params: dict[str, Any]) -> None:
        paid = Booking.create(**params).confirm_payment(reference='T123')

        assert paid.confirm_payment(reference='T999').payment_reference == 'T123'

    def test_empty_reference_is_rejected(self, params: dict[str, Any]) -> None:
        with pytest.raises(ValidationError):
            Booking.create(**params).confirm_payment(reference=' ')
