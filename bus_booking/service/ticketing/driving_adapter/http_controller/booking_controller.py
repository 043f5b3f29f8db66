from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.identity.domain.entity.admin_entity import AdminEntity
from bus_booking.service.identity.driving_adapter.http_controller.auth.admin_auth import (
    require_admin,
)
from bus_booking.service.shared_kernel.domain.enum.booking_status import BookingStatus
from bus_booking.service.shared_kernel.driving_adapter.csv_response import csv_response
from bus_booking.service.ticketing.app.command.approve_booking_use_case import (
    ApproveBookingUseCase,
)
from bus_booking.service.ticketing.app.command.cancel_booking_use_case import (
    CancelBookingUseCase,
)
from bus_booking.service.ticketing.app.command.create_booking_use_case import (
    CreateBookingUseCase,
)
from bus_booking.service.ticketing.app.command.delete_booking_use_case import (
    DeleteBookingUseCase,
)
from bus_booking.service.ticketing.app.query.export_bookings_use_case import (
    ExportBookingsUseCase,
)
from bus_booking.service.ticketing.app.query.get_booking_use_case import GetBookingUseCase
from bus_booking.service.ticketing.app.query.get_dashboard_stats_use_case import (
    GetDashboardStatsUseCase,
)
from bus_booking.service.ticketing.app.query.list_bookings_use_case import ListBookingsUseCase
from bus_booking.service.ticketing.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
    BookingSeatChangeResponse,
    DashboardStatsResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingSeatChangeResponse:
    change = await use_case.create_booking(
        full_name=request.full_name,
        email=request.email,
        phone=request.phone,
        contact_person_name=request.contact_person_name,
        contact_person_phone=request.contact_person_phone,
        passenger_class=request.passenger_class,
        pickup_point_id=request.pickup_point_id,
        destination_id=request.destination_id,
        departure_date=request.departure_date,
        seat_number=request.seat_number,
        bus_type=request.bus_type,
        referral=request.referral,
    )
    return BookingSeatChangeResponse.from_change(change)


@router.get('')
@Logger.io
async def list_bookings(
    booking_status: Optional[BookingStatus] = Query(None, alias='status'),
    current_admin: AdminEntity = Depends(require_admin),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingResponse]:
    listing = use_case.list_by_status(status=booking_status)
    return [BookingResponse.from_entity(booking) async for booking in listing]


@router.get('/stats')
@Logger.io
async def get_dashboard_stats(
    current_admin: AdminEntity = Depends(require_admin),
    use_case: GetDashboardStatsUseCase = Depends(GetDashboardStatsUseCase.depends),
) -> DashboardStatsResponse:
    return DashboardStatsResponse.from_stats(await use_case.execute())


@router.get('/export')
@Logger.io
async def export_bookings(
    booking_status: Optional[BookingStatus] = Query(None, alias='status'),
    current_admin: AdminEntity = Depends(require_admin),
    use_case: ExportBookingsUseCase = Depends(ExportBookingsUseCase.depends),
) -> Response:
    export = await use_case.execute(admin_id=current_admin.id, status=booking_status)
    return csv_response(export)


@router.get('/{booking_id}')
@Logger.io
async def get_booking(
    booking_id: UUID,
    current_admin: AdminEntity = Depends(require_admin),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.get_booking(booking_id=booking_id)
    return BookingResponse.from_entity(booking)


@router.post('/{booking_id}/approve')
@Logger.io
async def approve_booking(
    booking_id: UUID,
    current_admin: AdminEntity = Depends(require_admin),
    use_case: ApproveBookingUseCase = Depends(ApproveBookingUseCase.depends),
) -> BookingSeatChangeResponse:
    change = await use_case.execute(booking_id=booking_id, admin_id=current_admin.id)
    return BookingSeatChangeResponse.from_change(change)


@router.post('/{booking_id}/cancel')
@Logger.io
async def cancel_booking(
    booking_id: UUID,
    current_admin: AdminEntity = Depends(require_admin),
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> BookingSeatChangeResponse:
    change = await use_case.execute(booking_id=booking_id, admin_id=current_admin.id)
    return BookingSeatChangeResponse.from_change(change)


@router.delete('/{booking_id}')
@Logger.io
async def delete_booking(
    booking_id: UUID,
    current_admin: AdminEntity = Depends(require_admin),
    use_case: DeleteBookingUseCase = Depends(DeleteBookingUseCase.depends),
) -> BookingSeatChangeResponse:
    change = await use_case.execute(booking_id=booking_id, admin_id=current_admin.id)
    return BookingSeatChangeResponse.from_change(change)
