from typing import Optional
from uuid import UUID

import uuid_utils.compat as uuid_utils

from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.platform.metrics.booking_metrics import metrics
from bus_booking.service.audit.app.interface.i_activity_repo import IActivityRepo
from bus_booking.service.audit.domain.entity.activity_entity import ActivityRecord
from bus_booking.service.shared_kernel.app.interface.i_activity_recorder import (
    ActivityMetadata,
    IActivityRecorder,
)
from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction


class RecordActivityUseCase(IActivityRecorder):
    """
    Best-effort audit trail writer.

    Called after the audited operation committed. Each record is appended in
    its own transaction; a failure (bad metadata, store down) is logged and
    counted but never reaches the caller.
    """

    def __init__(self, *, activity_repo: IActivityRepo) -> None:
        self.activity_repo = activity_repo

    async def record(
        self,
        *,
        admin_id: UUID,
        action: ActivityAction,
        description: str,
        metadata: Optional[ActivityMetadata] = None,
    ) -> None:
        try:
            record = ActivityRecord.create(
                id=uuid_utils.uuid7(),
                admin_id=admin_id,
                action=action,
                description=description,
                metadata=metadata,
            )
            await self.activity_repo.append(record=record)
        except Exception as e:
            metrics.record_activity(result='failed')
            Logger.base.error(f'📝 [ACTIVITY] Failed to record {action} by admin {admin_id}: {e}')
            return

        metrics.record_activity(result='recorded')
        Logger.base.info(f'📝 [ACTIVITY] {action} by admin {admin_id}: {description}')
