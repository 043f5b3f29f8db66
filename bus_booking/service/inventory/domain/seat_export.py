from typing import Iterable

from bus_booking.service.inventory.domain.entity.seat_entity import Seat
from bus_booking.service.shared_kernel.domain.csv_export import render_csv


SEAT_EXPORT_HEADER = ('seat_number', 'state', 'booking_id', 'passenger_name')


def seats_to_csv(seats: Iterable[Seat]) -> str:
    return render_csv(
        SEAT_EXPORT_HEADER,
        ((s.seat_number, s.state.value, s.booking_id, s.passenger_name) for s in seats),
    )
