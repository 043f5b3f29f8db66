from fastapi import APIRouter, Depends, Response

from bus_booking.platform.config.core_setting import settings
from bus_booking.platform.exception.exceptions import ValidationError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.identity.domain.entity.admin_entity import AdminEntity
from bus_booking.service.identity.driving_adapter.http_controller.auth.admin_auth import (
    require_admin,
)
from bus_booking.service.inventory.app.command.initialize_seats_use_case import (
    InitializeSeatsUseCase,
)
from bus_booking.service.inventory.app.command.set_seat_blocked_use_case import (
    SetSeatBlockedUseCase,
)
from bus_booking.service.inventory.app.query.export_seats_use_case import ExportSeatsUseCase
from bus_booking.service.inventory.app.query.get_seat_snapshot_use_case import (
    GetSeatSnapshotUseCase,
)
from bus_booking.service.inventory.driving_adapter.http_controller.schema.seat_schema import (
    InitializeSeatsRequest,
    SeatMapResponse,
    SeatResponse,
    SetSeatBlockedRequest,
)
from bus_booking.service.shared_kernel.driving_adapter.csv_response import csv_response


router = APIRouter()


@router.get('', response_model=SeatMapResponse)
@Logger.io
async def get_seat_map(
    use_case: GetSeatSnapshotUseCase = Depends(GetSeatSnapshotUseCase.depends),
) -> SeatMapResponse:
    seats = await use_case.execute()
    return SeatMapResponse.from_entities(seats)


@router.post('/initialize', response_model=SeatMapResponse)
@Logger.io
async def initialize_seats(
    request: InitializeSeatsRequest,
    current_admin: AdminEntity = Depends(require_admin),
    use_case: InitializeSeatsUseCase = Depends(InitializeSeatsUseCase.depends),
) -> SeatMapResponse:
    capacity = request.capacity if request.capacity is not None else settings.SEAT_CAPACITY
    if capacity < 1:
        raise ValidationError('capacity must be positive')

    seats = await use_case.execute(capacity=capacity, admin_id=current_admin.id)
    return SeatMapResponse.from_entities(seats)


@router.get('/export')
@Logger.io
async def export_seats(
    current_admin: AdminEntity = Depends(require_admin),
    use_case: ExportSeatsUseCase = Depends(ExportSeatsUseCase.depends),
) -> Response:
    return csv_response(await use_case.execute(admin_id=current_admin.id))


@router.patch('/{seat_number}', response_model=SeatResponse)
@Logger.io
async def set_seat_blocked(
    seat_number: int,
    request: SetSeatBlockedRequest,
    current_admin: AdminEntity = Depends(require_admin),
    use_case: SetSeatBlockedUseCase = Depends(SetSeatBlockedUseCase.depends),
) -> SeatResponse:
    seat = await use_case.execute(
        seat_number=seat_number, blocked=request.blocked, admin_id=current_admin.id
    )
    return SeatResponse.from_entity(seat)
