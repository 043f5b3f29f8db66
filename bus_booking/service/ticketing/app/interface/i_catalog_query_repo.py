from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from bus_booking.service.ticketing.domain.entity.catalog_entity import Destination, PickupPoint


class ICatalogQueryRepo(ABC):
    @abstractmethod
    async def get_pickup_point(self, *, pickup_point_id: UUID) -> Optional[PickupPoint]:
        pass

    @abstractmethod
    async def list_pickup_points(self, *, include_inactive: bool = False) -> List[PickupPoint]:
        """Ordered by name"""
        pass

    @abstractmethod
    async def find_active_pickup_point_by_name(self, *, name: str) -> Optional[PickupPoint]:
        """Case-insensitive match among active pickup points"""
        pass

    @abstractmethod
    async def get_destination(self, *, destination_id: UUID) -> Optional[Destination]:
        pass

    @abstractmethod
    async def list_destinations(self, *, include_inactive: bool = False) -> List[Destination]:
        """Ordered by name"""
        pass

    @abstractmethod
    async def find_active_destination_by_name(self, *, name: str) -> Optional[Destination]:
        pass
