from abc import ABC, abstractmethod
from typing import Optional

from bus_booking.service.identity.domain.entity.admin_entity import AdminEntity


class IAdminQueryRepo(ABC):
    @abstractmethod
    async def get_by_email(self, *, email: str) -> Optional[AdminEntity]:
        """Case-insensitive lookup, hashed password included"""
        pass
