from typing import AsyncContextManager, Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bus_booking.platform.exception.exceptions import ConflictError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.identity.app.interface.i_admin_command_repo import IAdminCommandRepo
from bus_booking.service.identity.domain.entity.admin_entity import AdminEntity
from bus_booking.service.identity.driven_adapter.model.admin_model import AdminModel
from bus_booking.service.identity.driven_adapter.repo.admin_query_repo_impl import (
    AdminQueryRepoImpl,
)


class AdminCommandRepoImpl(IAdminCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, admin: AdminEntity) -> AdminEntity:
        async with self.session_factory() as session:
            admin_model = AdminModel(
                id=admin.id,
                email=admin.email,
                full_name=admin.full_name,
                hashed_password=admin.hashed_password,
                is_active=admin.is_active,
                created_at=admin.created_at,
            )
            session.add(admin_model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError(f'Admin with email {admin.email} already exists') from e

            return AdminQueryRepoImpl._model_to_entity(admin_model)
