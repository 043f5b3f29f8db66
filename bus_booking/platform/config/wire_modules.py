"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from bus_booking.service.audit.app.query import list_activities_use_case
from bus_booking.service.identity.app.command import (
    authenticate_admin_use_case,
    register_admin_use_case,
)
from bus_booking.service.identity.driving_adapter.http_controller import admin_controller
from bus_booking.service.identity.driving_adapter.http_controller.auth import admin_auth
from bus_booking.service.inventory.app.command import (
    initialize_seats_use_case,
    set_seat_blocked_use_case,
)
from bus_booking.service.inventory.app.query import (
    export_seats_use_case,
    get_seat_snapshot_use_case,
)
from bus_booking.service.ticketing.app.command import (
    approve_booking_use_case,
    cancel_booking_use_case,
    confirm_payment_use_case,
    create_booking_use_case,
    delete_booking_use_case,
    destination_use_case,
    pickup_point_use_case,
)
from bus_booking.service.ticketing.app.query import (
    export_bookings_use_case,
    get_booking_use_case,
    get_dashboard_stats_use_case,
    list_bookings_use_case,
    list_catalog_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    # identity
    register_admin_use_case,
    authenticate_admin_use_case,
    admin_auth,
    admin_controller,
    # inventory
    initialize_seats_use_case,
    set_seat_blocked_use_case,
    get_seat_snapshot_use_case,
    export_seats_use_case,
    # ticketing
    create_booking_use_case,
    approve_booking_use_case,
    cancel_booking_use_case,
    delete_booking_use_case,
    confirm_payment_use_case,
    pickup_point_use_case,
    destination_use_case,
    get_booking_use_case,
    list_bookings_use_case,
    get_dashboard_stats_use_case,
    export_bookings_use_case,
    list_catalog_use_case,
    # audit
    list_activities_use_case,
]
