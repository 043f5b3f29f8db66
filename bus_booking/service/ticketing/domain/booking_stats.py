"""
Dashboard aggregates

Pure functions over the current booking and seat collections; nothing here
is stored, every figure is recomputed on demand.
"""

from collections import Counter
from decimal import Decimal
from typing import Iterable

import attrs

from bus_booking.service.inventory.domain.entity.seat_entity import Seat
from bus_booking.service.shared_kernel.domain.enum.booking_status import BookingStatus
from bus_booking.service.shared_kernel.domain.enum.payment_status import PaymentStatus
from bus_booking.service.shared_kernel.domain.enum.seat_state import SeatState
from bus_booking.service.ticketing.domain.entity.booking_entity import Booking


ZERO = Decimal('0.00')


@attrs.frozen
class DashboardStats:
    total_bookings: int = 0
    pending_bookings: int = 0
    approved_bookings: int = 0
    cancelled_bookings: int = 0
    paid_bookings: int = 0
    total_revenue: Decimal = ZERO  # sum of approved amounts
    pending_revenue: Decimal = ZERO  # sum of pending amounts
    capacity: int = 0
    available_seats: int = 0
    occupied_seats: int = 0
    blocked_seats: int = 0
    approved_seats: int = 0  # occupied by an approved booking
    pending_seats: int = 0  # occupied by a pending booking


def compute_dashboard_stats(bookings: Iterable[Booking], seats: Iterable[Seat]) -> DashboardStats:
    bookings = list(bookings)
    seats = list(seats)

    status_counts = Counter(booking.status for booking in bookings)
    seat_counts = Counter(seat.state for seat in seats)

    total_revenue = sum(
        (b.amount for b in bookings if b.status == BookingStatus.APPROVED), start=ZERO
    )
    pending_revenue = sum(
        (b.amount for b in bookings if b.status == BookingStatus.PENDING), start=ZERO
    )

    status_by_booking = {b.id: b.status for b in bookings}
    occupying_status = Counter(
        status_by_booking.get(seat.booking_id)
        for seat in seats
        if seat.state == SeatState.OCCUPIED
    )

    return DashboardStats(
        total_bookings=len(bookings),
        pending_bookings=status_counts[BookingStatus.PENDING],
        approved_bookings=status_counts[BookingStatus.APPROVED],
        cancelled_bookings=status_counts[BookingStatus.CANCELLED],
        paid_bookings=sum(1 for b in bookings if b.payment_status == PaymentStatus.COMPLETED),
        total_revenue=total_revenue,
        pending_revenue=pending_revenue,
        capacity=len(seats),
        available_seats=seat_counts[SeatState.AVAILABLE],
        occupied_seats=seat_counts[SeatState.OCCUPIED],
        blocked_seats=seat_counts[SeatState.BLOCKED],
        approved_seats=occupying_status[BookingStatus.APPROVED],
        pending_seats=occupying_status[BookingStatus.PENDING],
    )
