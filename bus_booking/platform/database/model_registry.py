"""Importing this module registers every table on Base.metadata"""

from bus_booking.service.audit.driven_adapter.model.activity_model import ActivityModel
from bus_booking.service.identity.driven_adapter.model.admin_model import AdminModel
from bus_booking.service.inventory.driven_adapter.model.seat_model import SeatModel
from bus_booking.service.ticketing.driven_adapter.model.booking_model import BookingModel
from bus_booking.service.ticketing.driven_adapter.model.catalog_model import (
    DestinationModel,
    PickupPointModel,
)


__all__ = [
    'ActivityModel',
    'AdminModel',
    'BookingModel',
    'DestinationModel',
    'PickupPointModel',
    'SeatModel',
]
