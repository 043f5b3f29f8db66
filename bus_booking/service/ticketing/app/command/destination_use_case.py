from decimal import Decimal
from typing import Optional, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
import uuid_utils.compat as uuid_utils

from bus_booking.platform.config.di import Container
from bus_booking.platform.exception.exceptions import ConflictError, NotFoundError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.shared_kernel.app.interface.i_activity_recorder import (
    IActivityRecorder,
    MetadataValue,
)
from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction
from bus_booking.service.ticketing.app.interface.i_catalog_command_repo import ICatalogCommandRepo
from bus_booking.service.ticketing.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from bus_booking.service.ticketing.domain.entity.catalog_entity import Destination


class DestinationUseCase:
    """
    Admin management of destinations and their fares.

    A fare change only applies to bookings created afterwards; stored
    booking amounts are never recomputed.
    """

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

    async def _ensure_name_free(self, *, name: str, destination_id: UUID) -> None:
        clash = await self.catalog_query_repo.find_active_destination_by_name(name=name)
        if clash and clash.id != destination_id:
            raise ConflictError(f'Destination "{clash.name}" already exists')

    async def _get(self, destination_id: UUID) -> Destination:
        destination = await self.catalog_query_repo.get_destination(destination_id=destination_id)
        if not destination:
            raise NotFoundError('Destination not found')
        return destination

    @Logger.io
    async def create(self, *, name: str, price: Decimal, admin_id: UUID) -> Destination:
        destination = Destination.create(id=uuid_utils.uuid7(), name=name, price=price)
        await self._ensure_name_free(name=destination.name, destination_id=destination.id)
        created = await self.catalog_command_repo.create_destination(destination=destination)

        await self.activity_recorder.record(
            admin_id=admin_id,
            action=ActivityAction.DESTINATION_CREATED,
            description=f'Added destination {created.name} at {created.price}',
            metadata={
                'destination_id': str(created.id),
                'name': created.name,
                'price': created.price,
            },
        )
        return created

    @Logger.io
    async def update(
        self,
        *,
        destination_id: UUID,
        admin_id: UUID,
        name: Optional[str] = None,
        price: Optional[Decimal] = None,
    ) -> Destination:
        current = await self._get(destination_id)
        changed = current.update(name=name, price=price)
        if changed.active:
            await self._ensure_name_free(name=changed.name, destination_id=changed.id)
        updated = await self.catalog_command_repo.update_destination(destination=changed)

        metadata: dict[str, MetadataValue] = {'destination_id': str(updated.id)}
        if current.name != updated.name:
            metadata.update(previous_name=current.name, new_name=updated.name)
        if current.price != updated.price:
            metadata.update(previous_price=current.price, new_price=updated.price)

        await self.activity_recorder.record(
            admin_id=admin_id,
            action=ActivityAction.DESTINATION_UPDATED,
            description=f'Updated destination {updated.name}',
            metadata=metadata,
        )
        return updated

    @Logger.io
    async def deactivate(self, *, destination_id: UUID, admin_id: UUID) -> Destination:
        current = await self._get(destination_id)
        if not current.active:
            return current

        updated = await self.catalog_command_repo.update_destination(
            destination=current.deactivate()
        )
        await self.activity_recorder.record(
            admin_id=admin_id,
            action=ActivityAction.DESTINATION_DEACTIVATED,
            description=f'Removed destination {updated.name}',
            metadata={'destination_id': str(updated.id), 'name': updated.name},
        )
        return updated
