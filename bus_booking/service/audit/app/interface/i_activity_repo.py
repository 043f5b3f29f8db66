from abc import ABC, abstractmethod
from typing import List

from bus_booking.service.audit.domain.entity.activity_entity import ActivityRecord


class IActivityRepo(ABC):
    """Append-only store of administrative activity"""

    @abstractmethod
    async def append(self, *, record: ActivityRecord) -> ActivityRecord:
        """Persist one record in its own transaction"""
        pass

    @abstractmethod
    async def list_recent(self, *, limit: int, offset: int = 0) -> List[ActivityRecord]:
        """Newest first"""
        pass
