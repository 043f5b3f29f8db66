from decimal import Decimal
from typing import Tuple

import uuid_utils.compat as uuid_utils

from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.ticketing.app.interface.i_catalog_command_repo import ICatalogCommandRepo
from bus_booking.service.ticketing.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from bus_booking.service.ticketing.domain.entity.catalog_entity import Destination, PickupPoint


DEFAULT_PICKUP_POINTS: Tuple[str, ...] = ('Apowa', 'Kwesimintsim', 'Apolo', 'Fijai')

DEFAULT_DESTINATIONS: Tuple[Tuple[str, Decimal], ...] = (
    ('Madina/Adenta', Decimal('30.00')),
    ('Accra', Decimal('40.00')),
    ('Tema', Decimal('50.00')),
    ('Kasoa', Decimal('70.00')),
    ('Cape Coast', Decimal('80.00')),
    ('Takoradi', Decimal('60.00')),
)


class SeedDefaultCatalogUseCase:
    """
    Startup seeding of the default pickup points and destinations.

    Each table is seeded only while it is completely empty (inactive entries
    count), so removed defaults do not come back on restart.
    """

    def __init__(
        self,
        *,
        catalog_command_repo: ICatalogCommandRepo,
        catalog_query_repo: ICatalogQueryRepo,
    ) -> None:
        self.catalog_command_repo = catalog_command_repo
        self.catalog_query_repo = catalog_query_repo

    @Logger.io
    async def execute(self) -> Tuple[int, int]:
        """Returns (pickup points created, destinations created)"""
        pickup_created = 0
        if not await self.catalog_query_repo.list_pickup_points(include_inactive=True):
            for name in DEFAULT_PICKUP_POINTS:
                await self.catalog_command_repo.create_pickup_point(
                    pickup_point=PickupPoint.create(id=uuid_utils.uuid7(), name=name)
                )
                pickup_created += 1

        destination_created = 0
        if not await self.catalog_query_repo.list_destinations(include_inactive=True):
            for name, price in DEFAULT_DESTINATIONS:
                await self.catalog_command_repo.create_destination(
                    destination=Destination.create(id=uuid_utils.uuid7(), name=name, price=price)
                )
                destination_created += 1

        if pickup_created or destination_created:
            Logger.base.info(
                f'🗺️ [SEED-CATALOG] Seeded {pickup_created} pickup points '
                f'and {destination_created} destinations'
            )
        return pickup_created, destination_created
