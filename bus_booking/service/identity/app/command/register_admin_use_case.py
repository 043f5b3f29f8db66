from datetime import datetime, timezone
from functools import partial
from typing import Self

import anyio.to_thread
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pydantic import SecretStr
import uuid_utils.compat as uuid_utils

from bus_booking.platform.config.core_setting import Settings
from bus_booking.platform.config.di import Container
from bus_booking.platform.exception.exceptions import ConflictError, ForbiddenError, ValidationError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.identity.app.interface.i_admin_command_repo import IAdminCommandRepo
from bus_booking.service.identity.app.interface.i_admin_query_repo import IAdminQueryRepo
from bus_booking.service.identity.app.interface.i_password_hasher import IPasswordHasher
from bus_booking.service.identity.domain.entity.admin_entity import AdminEntity


class RegisterAdminUseCase:
    """Open admin sign-up, available only while ALLOW_ADMIN_REGISTRATION is on"""

    def __init__(
        self,
        *,
        admin_command_repo: IAdminCommandRepo,
        admin_query_repo: IAdminQueryRepo,
        password_hasher: IPasswordHasher,
        registration_open: bool,
    ) -> None:
        self.admin_command_repo = admin_command_repo
        self.admin_query_repo = admin_query_repo
        self.password_hasher = password_hasher
        self.registration_open = registration_open

    @classmethod
    @inject
    def depends(
        cls,
        admin_command_repo: IAdminCommandRepo = Depends(Provide[Container.admin_command_repo]),
        admin_query_repo: IAdminQueryRepo = Depends(Provide[Container.admin_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
        config_service: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            admin_command_repo=admin_command_repo,
            admin_query_repo=admin_query_repo,
            password_hasher=password_hasher,
            registration_open=config_service.ALLOW_ADMIN_REGISTRATION,
        )

    @Logger.io
    async def register(self, *, email: str, password: SecretStr, full_name: str) -> AdminEntity:
        if not self.registration_open:
            raise ForbiddenError('Admin registration is closed')

        email = (email or '').strip().lower()
        full_name = (full_name or '').strip()
        if not email:
            raise ValidationError('email is required')
        if not full_name:
            raise ValidationError('full_name is required')

        if await self.admin_query_repo.get_by_email(email=email):
            raise ConflictError(f'Admin with email {email} already exists')

        admin = AdminEntity(
            id=uuid_utils.uuid7(),
            email=email,
            full_name=full_name,
            is_active=True,
            created_at=datetime.now(timezone.utc),
        )
        await anyio.to_thread.run_sync(
            partial(
                admin.set_password,
                plain_password=password,
                password_hasher=self.password_hasher,
            )
        )
        created = await self.admin_command_repo.create(admin=admin)

        Logger.base.info(f'🔐 [REGISTER] Admin {created.email} registered')
        return created
