from abc import ABC, abstractmethod
from typing import List, Optional

from bus_booking.service.inventory.domain.entity.seat_entity import Seat


class ISeatQueryRepo(ABC):
    """Repository interface for seat read operations"""

    @abstractmethod
    async def snapshot(self) -> List[Seat]:
        """All seats ordered by seat number"""
        pass

    @abstractmethod
    async def get(self, *, seat_number: int) -> Optional[Seat]:
        pass
