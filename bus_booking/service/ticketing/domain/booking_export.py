from typing import Iterable, Mapping
from uuid import UUID

from bus_booking.service.shared_kernel.domain.csv_export import render_csv
from bus_booking.service.ticketing.domain.entity.booking_entity import Booking


BOOKING_EXPORT_HEADER = (
    'booking_id',
    'name',
    'email',
    'phone',
    'class',
    'pickup',
    'destination',
    'seat',
    'amount',
    'status',
    'payment_status',
    'payment_reference',
    'departure_date',
    'booking_date',
)


def bookings_to_csv(
    bookings: Iterable[Booking],
    *,
    pickup_names: Mapping[UUID, str],
    destination_names: Mapping[UUID, str],
) -> str:
    """Unknown catalog ids are exported as empty names rather than dropped"""
    return render_csv(
        BOOKING_EXPORT_HEADER,
        (
            (
                booking.id,
                booking.full_name,
                booking.email,
                booking.phone,
                booking.passenger_class,
                pickup_names.get(booking.pickup_point_id, ''),
                destination_names.get(booking.destination_id, ''),
                booking.seat_number,
                booking.amount,
                booking.status.value,
                booking.payment_status.value,
                booking.payment_reference,
                booking.departure_date,
                booking.created_at,
            )
            for booking in bookings
        ),
    )
