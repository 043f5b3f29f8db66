from typing import List

from fastapi import APIRouter, Depends

from bus_booking.platform.config.core_setting import settings
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.audit.app.query.list_activities_use_case import ListActivitiesUseCase
from bus_booking.service.audit.driving_adapter.http_controller.schema.activity_schema import (
    ActivityResponse,
)
from bus_booking.service.identity.domain.entity.admin_entity import AdminEntity
from bus_booking.service.identity.driving_adapter.http_controller.auth.admin_auth import (
    require_admin,
)


router = APIRouter()


@router.get('')
@Logger.io
async def list_activities(
    limit: int = settings.ACTIVITY_LIST_DEFAULT_LIMIT,
    offset: int = 0,
    current_admin: AdminEntity = Depends(require_admin),
    use_case: ListActivitiesUseCase = Depends(ListActivitiesUseCase.depends),
) -> List[ActivityResponse]:
    records = await use_case.execute(limit=limit, offset=offset)
    return [ActivityResponse.from_entity(r) for r in records]
