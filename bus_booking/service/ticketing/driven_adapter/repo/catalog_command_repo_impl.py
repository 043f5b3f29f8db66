from typing import AsyncContextManager, Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bus_booking.platform.exception.exceptions import ConflictError, NotFoundError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.ticketing.app.interface.i_catalog_command_repo import ICatalogCommandRepo
from bus_booking.service.ticketing.domain.entity.catalog_entity import Destination, PickupPoint
from bus_booking.service.ticketing.driven_adapter.model.catalog_model import (
    DestinationModel,
    PickupPointModel,
)
from bus_booking.service.ticketing.driven_adapter.repo.catalog_query_repo_impl import (
    CatalogQueryRepoImpl,
)


class CatalogCommandRepoImpl(ICatalogCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    async def _commit_or_conflict(self, session: AsyncSession, *, name: str) -> None:
        try:
            await session.commit()
        except IntegrityError as e:
            await session.rollback()
            raise ConflictError(f'An active entry named "{name}" already exists') from e

    @Logger.io
    async def create_pickup_point(self, *, pickup_point: PickupPoint) -> PickupPoint:
        async with self.session_factory() as session:
            model = PickupPointModel(
                id=pickup_point.id,
                name=pickup_point.name,
                active=pickup_point.active,
                created_at=pickup_point.created_at,
                updated_at=pickup_point.updated_at,
            )
            session.add(model)
            await self._commit_or_conflict(session, name=pickup_point.name)
            return CatalogQueryRepoImpl._pickup_point_to_entity(model)

    @Logger.io
    async def update_pickup_point(self, *, pickup_point: PickupPoint) -> PickupPoint:
        async with self.session_factory() as session:
            model = await session.get(PickupPointModel, pickup_point.id)
            if model is None:
                raise NotFoundError('Pickup point not found')
            model.name = pickup_point.name
            model.active = pickup_point.active
            model.updated_at = pickup_point.updated_at
            await self._commit_or_conflict(session, name=pickup_point.name)
            return CatalogQueryRepoImpl._pickup_point_to_entity(model)

    @Logger.io
    async def create_destination(self, *, destination: Destination) -> Destination:
        async with self.session_factory() as session:
            model = DestinationModel(
                id=destination.id,
                name=destination.name,
                price=destination.price,
                active=destination.active,
                created_at=destination.created_at,
                updated_at=destination.updated_at,
            )
            session.add(model)
            await self._commit_or_conflict(session, name=destination.name)
            return CatalogQueryRepoImpl._destination_to_entity(model)

    @Logger.io
    async def update_destination(self, *, destination: Destination) -> Destination:
        async with self.session_factory() as session:
            model = await session.get(DestinationModel, destination.id)
            if model is None:
                raise NotFoundError('Destination not found')
            model.name = destination.name
            model.price = destination.price
            model.active = destination.active
            model.updated_at = destination.updated_at
            await self._commit_or_conflict(session, name=destination.name)
            return CatalogQueryRepoImpl._destination_to_entity(model)
