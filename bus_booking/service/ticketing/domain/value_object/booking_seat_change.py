from typing import Optional

import attrs

from bus_booking.service.inventory.domain.entity.seat_entity import Seat
from bus_booking.service.ticketing.domain.entity.booking_entity import Booking


@attrs.frozen
class BookingSeatChange:
    """Canonical post-state of a command that touches a booking and its seat"""

    booking: Booking
    seat: Optional[Seat]
