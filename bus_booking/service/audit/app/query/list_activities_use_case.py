from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_booking.platform.config.core_setting import Settings
from bus_booking.platform.config.di import Container
from bus_booking.platform.exception.exceptions import ValidationError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.audit.app.interface.i_activity_repo import IActivityRepo
from bus_booking.service.audit.domain.entity.activity_entity import ActivityRecord


class ListActivitiesUseCase:
    def __init__(self, *, activity_repo: IActivityRepo, max_limit: int) -> None:
        self.activity_repo = activity_repo
        self.max_limit = max_limit

    @classmethod
    @inject
    def depends(
        cls,
        activity_repo: IActivityRepo = Depends(Provide[Container.activity_repo]),
        config_service: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(activity_repo=activity_repo, max_limit=config_service.ACTIVITY_LIST_MAX_LIMIT)

    @Logger.io
    async def execute(self, *, limit: int, offset: int = 0) -> List[ActivityRecord]:
        if not 1 <= limit <= self.max_limit:
            raise ValidationError(f'limit must be between 1 and {self.max_limit}')
        if offset < 0:
            raise ValidationError('offset cannot be negative')

        return await self.activity_repo.list_recent(limit=limit, offset=offset)
