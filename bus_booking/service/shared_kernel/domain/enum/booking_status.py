"""Booking Status Enum"""

from enum import StrEnum


class BookingStatus(StrEnum):
    PENDING = 'pending'
    APPROVED = 'approved'
    CANCELLED = 'cancelled'
