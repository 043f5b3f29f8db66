from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from bus_booking.platform.config.di import Container
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.ticketing.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from bus_booking.service.ticketing.domain.entity.catalog_entity import Destination, PickupPoint


class ListCatalogUseCase:
    def __init__(self, *, catalog_query_repo: ICatalogQueryRepo) -> None:
        self.catalog_query_repo = catalog_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        catalog_query_repo: ICatalogQueryRepo = Depends(Provide[Container.catalog_query_repo]),
    ) -> Self:
        return cls(catalog_query_repo=catalog_query_repo)

    @Logger.io
    async def list_pickup_points(self, *, include_inactive: bool = False) -> List[PickupPoint]:
        return await self.catalog_query_repo.list_pickup_points(include_inactive=include_inactive)

    @Logger.io
    async def list_destinations(self, *, include_inactive: bool = False) -> List[Destination]:
        return await self.catalog_query_repo.list_destinations(include_inactive=include_inactive)
