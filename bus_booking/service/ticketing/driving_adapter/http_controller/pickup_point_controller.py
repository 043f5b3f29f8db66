from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.identity.domain.entity.admin_entity import AdminEntity
from bus_booking.service.identity.driving_adapter.http_controller.auth.admin_auth import (
    require_admin,
)
from bus_booking.service.ticketing.app.command.pickup_point_use_case import PickupPointUseCase
from bus_booking.service.ticketing.app.query.list_catalog_use_case import ListCatalogUseCase
from bus_booking.service.ticketing.driving_adapter.http_controller.schema.catalog_schema import (
    PickupPointRequest,
    PickupPointResponse,
)


router = APIRouter()


@router.get('')
@Logger.io
async def list_pickup_points(
    include_inactive: bool = False,
    use_case: ListCatalogUseCase = Depends(ListCatalogUseCase.depends),
) -> List[PickupPointResponse]:
    pickup_points = await use_case.list_pickup_points(include_inactive=include_inactive)
    return [PickupPointResponse.from_entity(p) for p in pickup_points]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_pickup_point(
    request: PickupPointRequest,
    current_admin: AdminEntity = Depends(require_admin),
    use_case: PickupPointUseCase = Depends(PickupPointUseCase.depends),
) -> PickupPointResponse:
    pickup_point = await use_case.create(name=request.name, admin_id=current_admin.id)
    return PickupPointResponse.from_entity(pickup_point)


@router.patch('/{pickup_point_id}')
@Logger.io
async def rename_pickup_point(
    pickup_point_id: UUID,
    request: PickupPointRequest,
    current_admin: AdminEntity = Depends(require_admin),
    use_case: PickupPointUseCase = Depends(PickupPointUseCase.depends),
) -> PickupPointResponse:
    pickup_point = await use_case.rename(
        pickup_point_id=pickup_point_id, name=request.name, admin_id=current_admin.id
    )
    return PickupPointResponse.from_entity(pickup_point)


@router.delete('/{pickup_point_id}')
@Logger.io
async def deactivate_pickup_point(
    pickup_point_id: UUID,
    current_admin: AdminEntity = Depends(require_admin),
    use_case: PickupPointUseCase = Depends(PickupPointUseCase.depends),
) -> PickupPointResponse:
    pickup_point = await use_case.deactivate(
        pickup_point_id=pickup_point_id, admin_id=current_admin.id
    )
    return PickupPointResponse.from_entity(pickup_point)
