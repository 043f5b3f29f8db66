"""Activity Action Enum - tags of the administrative audit trail"""

from enum import StrEnum


class ActivityAction(StrEnum):
    LOGIN = 'LOGIN'
    LOGOUT = 'LOGOUT'

    SEATS_INITIALIZED = 'SEATS_INITIALIZED'
    SEAT_BLOCKED = 'SEAT_BLOCKED'
    SEAT_UNBLOCKED = 'SEAT_UNBLOCKED'

    BOOKING_APPROVED = 'BOOKING_APPROVED'
    BOOKING_REJECTED = 'BOOKING_REJECTED'
    BOOKING_DELETED = 'BOOKING_DELETED'

    PICKUP_POINT_CREATED = 'PICKUP_POINT_CREATED'
    PICKUP_POINT_UPDATED = 'PICKUP_POINT_UPDATED'
    PICKUP_POINT_DEACTIVATED = 'PICKUP_POINT_DEACTIVATED'
    DESTINATION_CREATED = 'DESTINATION_CREATED'
    DESTINATION_UPDATED = 'DESTINATION_UPDATED'
    DESTINATION_DEACTIVATED = 'DESTINATION_DEACTIVATED'

    DATA_EXPORTED = 'DATA_EXPORTED'
