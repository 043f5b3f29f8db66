from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.identity.domain.entity.admin_entity import AdminEntity
from bus_booking.service.identity.driving_adapter.http_controller.auth.admin_auth import (
    require_admin,
)
from bus_booking.service.ticketing.app.command.destination_use_case import DestinationUseCase
from bus_booking.service.ticketing.app.query.list_catalog_use_case import ListCatalogUseCase
from bus_booking.service.ticketing.driving_adapter.http_controller.schema.catalog_schema import (
    DestinationCreateRequest,
    DestinationResponse,
    DestinationUpdateRequest,
)


router = APIRouter()


@router.get('')
@Logger.io
async def list_destinations(
    include_inactive: bool = False,
    use_case: ListCatalogUseCase = Depends(ListCatalogUseCase.depends),
) -> List[DestinationResponse]:
    destinations = await use_case.list_destinations(include_inactive=include_inactive)
    return [DestinationResponse.from_entity(d) for d in destinations]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_destination(
    request: DestinationCreateRequest,
    current_admin: AdminEntity = Depends(require_admin),
    use_case: DestinationUseCase = Depends(DestinationUseCase.depends),
) -> DestinationResponse:
    destination = await use_case.create(
        name=request.name, price=request.price, admin_id=current_admin.id
    )
    return DestinationResponse.from_entity(destination)


@router.patch('/{destination_id}')
@Logger.io
async def update_destination(
    destination_id: UUID,
    request: DestinationUpdateRequest,
    current_admin: AdminEntity = Depends(require_admin),
    use_case: DestinationUseCase = Depends(DestinationUseCase.depends),
) -> DestinationResponse:
    destination = await use_case.update(
        destination_id=destination_id,
        admin_id=current_admin.id,
        name=request.name,
        price=request.price,
    )
    return DestinationResponse.from_entity(destination)


@router.delete('/{destination_id}')
@Logger.io
async def deactivate_destination(
    destination_id: UUID,
    current_admin: AdminEntity = Depends(require_admin),
    use_case: DestinationUseCase = Depends(DestinationUseCase.depends),
) -> DestinationResponse:
    destination = await use_case.deactivate(
        destination_id=destination_id, admin_id=current_admin.id
    )
    return DestinationResponse.from_entity(destination)
