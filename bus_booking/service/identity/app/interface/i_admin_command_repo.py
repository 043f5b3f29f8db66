from abc import ABC, abstractmethod

from bus_booking.service.identity.domain.entity.admin_entity import AdminEntity


class IAdminCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, admin: AdminEntity) -> AdminEntity:
        """
        Raises:
            ConflictError: email already registered
        """
        pass
