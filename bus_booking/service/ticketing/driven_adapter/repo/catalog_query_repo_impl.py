from typing import AsyncContextManager, Callable, List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.ticketing.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from bus_booking.service.ticketing.domain.entity.catalog_entity import Destination, PickupPoint
from bus_booking.service.ticketing.driven_adapter.model.catalog_model import (
    DestinationModel,
    PickupPointModel,
)


class CatalogQueryRepoImpl(ICatalogQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _pickup_point_to_entity(model: PickupPointModel) -> PickupPoint:
        return PickupPoint(
            id=model.id,
            name=model.name,
            active=model.active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def _destination_to_entity(model: DestinationModel) -> Destination:
        return Destination(
            id=model.id,
            name=model.name,
            price=model.price,
            active=model.active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @Logger.io
    async def get_pickup_point(self, *, pickup_point_id: UUID) -> Optional[PickupPoint]:
        async with self.session_factory() as session:
            model = await session.get(PickupPointModel, pickup_point_id)
            return self._pickup_point_to_entity(model) if model else None

    @Logger.io
    async def list_pickup_points(self, *, include_inactive: bool = False) -> List[PickupPoint]:
        stmt = select(PickupPointModel).order_by(PickupPointModel.name)
        if not include_inactive:
            stmt = stmt.where(PickupPointModel.active.is_(True))
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [self._pickup_point_to_entity(model) for model in result.scalars()]

    @Logger.io
    async def find_active_pickup_point_by_name(self, *, name: str) -> Optional[PickupPoint]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(PickupPointModel).where(
                    func.lower(PickupPointModel.name) == name.lower(),
                    PickupPointModel.active.is_(True),
                )
            )
            model = result.scalars().first()
            return self._pickup_point_to_entity(model) if model else None

    @Logger.io
    async def get_destination(self, *, destination_id: UUID) -> Optional[Destination]:
        async with self.session_factory() as session:
            model = await session.get(DestinationModel, destination_id)
            return self._destination_to_entity(model) if model else None

    @Logger.io
    async def list_destinations(self, *, include_inactive: bool = False) -> List[Destination]:
        stmt = select(DestinationModel).order_by(DestinationModel.name)
        if not include_inactive:
            stmt = stmt.where(DestinationModel.active.is_(True))
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [self._destination_to_entity(model) for model in result.scalars()]

    @Logger.io
    async def find_active_destination_by_name(self, *, name: str) -> Optional[Destination]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(DestinationModel).where(
                    func.lower(DestinationModel.name) == name.lower(),
                    DestinationModel.active.is_(True),
                )
            )
            model = result.scalars().first()
            return self._destination_to_entity(model) if model else None
