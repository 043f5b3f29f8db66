from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Mapping, Optional
from uuid import UUID

from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction


MetadataValue = str | int | float | bool | datetime | Decimal
ActivityMetadata = Mapping[str, MetadataValue]


class IActivityRecorder(ABC):
    """
    Port for the administrative audit trail, shared by every bounded context.

    Implementations are best-effort: `record` must never raise, so a failing
    audit store can not roll back or block the operation being audited.
    """

    @abstractmethod
    async def record(
        self,
        *,
        admin_id: UUID,
        action: ActivityAction,
        description: str,
        metadata: Optional[ActivityMetadata] = None,
    ) -> None:
        pass
