"""Shared Kernel Enums"""

from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction
from bus_booking.service.shared_kernel.domain.enum.booking_status import BookingStatus
from bus_booking.service.shared_kernel.domain.enum.payment_status import PaymentStatus
from bus_booking.service.shared_kernel.domain.enum.seat_state import SeatState

__all__ = ['ActivityAction', 'BookingStatus', 'PaymentStatus', 'SeatState']
