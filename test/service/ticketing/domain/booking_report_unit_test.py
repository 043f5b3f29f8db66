"""Dashboard aggregates and CSV export over in-memory bookings"""

from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID

import pytest
import uuid_utils.compat as uuid_utils

from bus_booking.service.inventory.domain.entity.seat_entity import Seat
from bus_booking.service.shared_kernel.domain.enum.booking_status import BookingStatus
from bus_booking.service.shared_kernel.domain.enum.payment_status import PaymentStatus
from bus_booking.service.shared_kernel.domain.enum.seat_state import SeatState
from bus_booking.service.ticketing.domain.booking_export import (
    BOOKING_EXPORT_HEADER,
    bookings_to_csv,
)
from bus_booking.service.ticketing.domain.booking_stats import compute_dashboard_stats
from bus_booking.service.ticketing.domain.entity.booking_entity import Booking


PICKUP_ID = uuid_utils.uuid7()
DESTINATION_ID = uuid_utils.uuid7()


def _booking(
    seat_number: int,
    amount: str,
    status: BookingStatus = BookingStatus.PENDING,
    payment_status: PaymentStatus = PaymentStatus.PENDING,
) -> Booking:
    return Booking(
        id=uuid_utils.uuid7(),
        full_name=f'Passenger {seat_number}',
        email=f'p{seat_number}@example.com',
        phone='0241234567',
        contact_person_name='Contact',
        contact_person_phone='0209876543',
        passenger_class='Level 200',
        pickup_point_id=PICKUP_ID,
        destination_id=DESTINATION_ID,
        departure_date=date(2025, 2, 14),
        seat_number=seat_number,
        amount=Decimal(amount),
        status=status,
        payment_status=payment_status,
        created_at=datetime(2025, 2, 1, 9, 30, tzinfo=timezone.utc),
    )


def _seat_for(booking: Booking) -> Seat:
    return Seat(
        seat_number=booking.seat_number,
        state=SeatState.OCCUPIED,
        booking_id=booking.id,
        passenger_name=booking.full_name,
    )


@pytest.mark.unit
class TestDashboardStats:
    def test_figures_follow_bookings_and_seats(self) -> None:
        # Given: one pending, two approved (one paid), one cancelled; seat 9 blocked
        pending = _booking(1, '40.00')
        approved = _booking(2, '50.00', BookingStatus.APPROVED, PaymentStatus.COMPLETED)
        approved_unpaid = _booking(3, '30.00', BookingStatus.APPROVED)
        cancelled = _booking(4, '80.00', BookingStatus.CANCELLED)
        seats = [
            _seat_for(pending),
            _seat_for(approved),
            _seat_for(approved_unpaid),
            Seat(seat_number=4),
            Seat(seat_number=5),
            Seat(seat_number=9, state=SeatState.BLOCKED),
        ]

        # When
        stats = compute_dashboard_stats([pending, approved, approved_unpaid, cancelled], seats)

        # Then
        assert stats.total_bookings == 4
        assert stats.pending_bookings == 1
        assert stats.approved_bookings == 2
        assert stats.cancelled_bookings == 1
        assert stats.paid_bookings == 1
        assert stats.total_revenue == Decimal('80.00')
        assert stats.pending_revenue == Decimal('40.00')
        assert stats.capacity == 6
        assert stats.available_seats == 2
        assert stats.occupied_seats == 3
        assert stats.blocked_seats == 1
        assert stats.approved_seats == 2
        assert stats.pending_seats == 1

    def test_empty_ledger(self) -> None:
        stats = compute_dashboard_stats([], [Seat(seat_number=1)])

        assert stats.total_bookings == 0
        assert stats.total_revenue == Decimal('0.00')
        assert stats.available_seats == 1


@pytest.mark.unit
class TestBookingExport:
    def test_rows_resolve_catalog_names(self) -> None:
        booking = _booking(12, '40.00').confirm_payment(reference='T123')

        lines = bookings_to_csv(
            [booking],
            pickup_names={PICKUP_ID: 'Apowa'},
            destination_names={DESTINATION_ID: 'Accra'},
        ).splitlines()

        assert lines[0] == ','.join(BOOKING_EXPORT_HEADER)
        cells = lines[1].split(',')
        assert UUID(cells[0]) == booking.id
        assert cells[5:] == [
            'Apowa',
            'Accra',
            '12',
            '40.00',
            'pending',
            'completed',
            'T123',
            '2025-02-14',
            '2025-02-01T09:30:00+00:00',
        ]

    def test_unknown_catalog_ids_export_empty_names(self) -> None:
        lines = bookings_to_csv(
            [_booking(1, '40.00')], pickup_names={}, destination_names={}
        ).splitlines()

        cells = lines[1].split(',')
        assert cells[5] == ''
        assert cells[6] == ''

    def test_names_with_commas_are_quoted(self) -> None:
        booking = _booking(1, '40.00')
        booking.full_name = 'Asante, Kofi'

        line = bookings_to_csv([booking], pickup_names={}, destination_names={}).splitlines()[1]

        assert '"Asante, Kofi"' in line
