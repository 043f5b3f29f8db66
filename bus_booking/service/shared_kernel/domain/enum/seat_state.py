"""Seat State Enum"""

from enum import StrEnum


class SeatState(StrEnum):
    AVAILABLE = 'available'
    OCCUPIED = 'occupied'  # held by exactly one non-cancelled booking
    BLOCKED = 'blocked'  # administratively disabled, no booking
