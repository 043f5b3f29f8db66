from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.identity.app.interface.i_admin_query_repo import IAdminQueryRepo
from bus_booking.service.identity.domain.entity.admin_entity import AdminEntity
from bus_booking.service.identity.driven_adapter.model.admin_model import AdminModel


class AdminQueryRepoImpl(IAdminQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _model_to_entity(admin_model: AdminModel) -> AdminEntity:
        return AdminEntity(
            id=admin_model.id,
            email=admin_model.email,
            full_name=admin_model.full_name,
            hashed_password=admin_model.hashed_password,
            is_active=admin_model.is_active,
            created_at=admin_model.created_at,
        )

    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[AdminEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(AdminModel).where(func.lower(AdminModel.email) == email.lower())
            )
            admin_model = result.scalar_one_or_none()
            return self._model_to_entity(admin_model) if admin_model else None
