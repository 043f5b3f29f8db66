from typing import AsyncContextManager, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.audit.app.interface.i_activity_repo import IActivityRepo
from bus_booking.service.audit.domain.entity.activity_entity import ActivityRecord
from bus_booking.service.audit.driven_adapter.model.activity_model import ActivityModel
from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction


class ActivityRepoImpl(IActivityRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _model_to_entity(model: ActivityModel) -> ActivityRecord:
        return ActivityRecord(
            id=model.id,
            admin_id=model.admin_id,
            action=ActivityAction(model.action),
            description=model.description,
            metadata=dict(model.details or {}),
            created_at=model.created_at,
        )

    @Logger.io
    async def append(self, *, record: ActivityRecord) -> ActivityRecord:
        async with self.session_factory() as session:
            model = ActivityModel(
                id=record.id,
                admin_id=record.admin_id,
                action=record.action.value,
                description=record.description,
                details=dict(record.metadata),
                created_at=record.created_at,
            )
            session.add(model)
            await session.commit()
            return self._model_to_entity(model)

    @Logger.io
    async def list_recent(self, *, limit: int, offset: int = 0) -> List[ActivityRecord]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ActivityModel)
                .order_by(ActivityModel.created_at.desc(), ActivityModel.id.desc())
                .limit(limit)
                .offset(offset)
            )
            return [self._model_to_entity(model) for model in result.scalars()]
