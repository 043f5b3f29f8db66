from abc import ABC, abstractmethod

from bus_booking.service.ticketing.domain.entity.catalog_entity import Destination, PickupPoint


class ICatalogCommandRepo(ABC):
    """
    Writes for pickup points and destinations

    Each call runs in its own transaction. Saving an active entry whose name
    clashes (case-insensitively) with another active entry raises ConflictError.
    """

    @abstractmethod
    async def create_pickup_point(self, *, pickup_point: PickupPoint) -> PickupPoint:
        pass

    @abstractmethod
    async def update_pickup_point(self, *, pickup_point: PickupPoint) -> PickupPoint:
        pass

    @abstractmethod
    async def create_destination(self, *, destination: Destination) -> Destination:
        pass

    @abstractmethod
    async def update_destination(self, *, destination: Destination) -> Destination:
        pass
