from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
import uuid_utils.compat as uuid_utils

from bus_booking.platform.config.di import Container
from bus_booking.platform.exception.exceptions import ConflictError, NotFoundError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.shared_kernel.app.interface.i_activity_recorder import IActivityRecorder
from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction
from bus_booking.service.ticketing.app.interface.i_catalog_command_repo import ICatalogCommandRepo
from bus_booking.service.ticketing.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from bus_booking.service.ticketing.domain.entity.catalog_entity import PickupPoint


class PickupPointUseCase:
    """Admin management of pickup points; bookings keep the id they were made with"""

    def __init__(
        self,
        *,
        catalog_command_repo: ICatalogCommandRepo,
        catalog_query_repo: ICatalogQueryRepo,
        activity_recorder: IActivityRecorder,
    ) -> None:
        self.catalog_command_repo = catalog_command_repo
        self.catalog_query_repo = catalog_query_repo
        self.activity_recorder = activity_recorder

    @classmethod
    @inject
    def depends(
        cls,
        catalog_command_repo: ICatalogCommandRepo = Depends(
            Provide[Container.catalog_command_repo]
        ),
        catalog_query_repo: ICatalogQueryRepo = Depends(Provide[Container.catalog_query_repo]),
        activity_recorder: IActivityRecorder = Depends(Provide[Container.activity_recorder]),
    ) -> Self:
        return cls(
            catalog_command_repo=catalog_command_repo,
            catalog_query_repo=catalog_query_repo,
            activity_recorder=activity_recorder,
        )

    async def _ensure_name_free(self, *, name: str, pickup_point_id: UUID) -> None:
        clash = await self.catalog_query_repo.find_active_pickup_point_by_name(name=name)
        if clash and clash.id != pickup_point_id:
            raise ConflictError(f'Pickup point "{clash.name}" already exists')

    async def _get(self, pickup_point_id: UUID) -> PickupPoint:
        pickup_point = await self.catalog_query_repo.get_pickup_point(
            pickup_point_id=pickup_point_id
        )
        if not pickup_point:
            raise NotFoundError('Pickup point not found')
        return pickup_point

    @Logger.io
    async def create(self, *, name: str, admin_id: UUID) -> PickupPoint:
        pickup_point = PickupPoint.create(id=uuid_utils.uuid7(), name=name)
        await self._ensure_name_free(name=pickup_point.name, pickup_point_id=pickup_point.id)
        created = await self.catalog_command_repo.create_pickup_point(pickup_point=pickup_point)

        await self.activity_recorder.record(
            admin_id=admin_id,
            action=ActivityAction.PICKUP_POINT_CREATED,
            description=f'Added pickup point {created.name}',
            metadata={'pickup_point_id': str(created.id), 'name': created.name},
        )
        return created

    @Logger.io
    async def rename(self, *, pickup_point_id: UUID, name: str, admin_id: UUID) -> PickupPoint:
        current = await self._get(pickup_point_id)
        renamed = current.rename(name=name)
        if renamed.active:
            await self._ensure_name_free(name=renamed.name, pickup_point_id=renamed.id)
        updated = await self.catalog_command_repo.update_pickup_point(pickup_point=renamed)

        await self.activity_recorder.record(
            admin_id=admin_id,
            action=ActivityAction.PICKUP_POINT_UPDATED,
            description=f'Renamed pickup point {current.name} to {updated.name}',
            metadata={
                'pickup_point_id': str(updated.id),
                'previous_name': current.name,
                'new_name': updated.name,
            },
        )
        return updated

    @Logger.io
    async def deactivate(self, *, pickup_point_id: UUID, admin_id: UUID) -> PickupPoint:
        current = await self._get(pickup_point_id)
        if not current.active:
            return current

        updated = await self.catalog_command_repo.update_pickup_point(
            pickup_point=current.deactivate()
        )
        await self.activity_recorder.record(
            admin_id=admin_id,
            action=ActivityAction.PICKUP_POINT_DEACTIVATED,
            description=f'Removed pickup point {updated.name}',
            metadata={'pickup_point_id': str(updated.id), 'name': updated.name},
        )
        return updated
