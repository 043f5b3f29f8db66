from functools import partial
from typing import Self

import anyio.to_thread
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pydantic import SecretStr

from bus_booking.platform.config.di import Container
from bus_booking.platform.exception.exceptions import AuthenticationFailedError
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.identity.app.interface.i_admin_query_repo import IAdminQueryRepo
from bus_booking.service.identity.app.interface.i_password_hasher import IPasswordHasher
from bus_booking.service.identity.domain.entity.admin_entity import AdminEntity
from bus_booking.service.shared_kernel.app.interface.i_activity_recorder import IActivityRecorder
from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction


class AuthenticateAdminUseCase:
    """
    Admin sign-in and sign-out

    Unknown email and wrong password fail with the same error so the
    response does not reveal which admins exist.
    """

    def __init__(
        self,
        *,
        admin_query_repo: IAdminQueryRepo,
        password_hasher: IPasswordHasher,
        activity_recorder: IActivityRecorder,
    ) -> None:
        self.admin_query_repo = admin_query_repo
        self.password_hasher = password_hasher
        self.activity_recorder = activity_recorder

    @classmethod
    @inject
    def depends(
        cls,
        admin_query_repo: IAdminQueryRepo = Depends(Provide[Container.admin_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
        activity_recorder: IActivityRecorder = Depends(Provide[Container.activity_recorder]),
    ) -> Self:
        return cls(
            admin_query_repo=admin_query_repo,
            password_hasher=password_hasher,
            activity_recorder=activity_recorder,
        )

    @Logger.io
    async def login(self, *, email: str, password: SecretStr) -> AdminEntity:
        admin = await self.admin_query_repo.get_by_email(email=(email or '').strip())
        if not admin:
            raise AuthenticationFailedError()

        # bcrypt is CPU bound, keep it off the event loop
        password_ok = await anyio.to_thread.run_sync(
            partial(
                self.password_hasher.verify_password,
                plain_password=password,
                hashed_password=admin.hashed_password,
            )
        )
        if not password_ok:
            raise AuthenticationFailedError()
        admin.validate_active()

        await self.activity_recorder.record(
            admin_id=admin.id,
            action=ActivityAction.LOGIN,
            description=f'{admin.full_name} signed in',
            metadata={'email': admin.email},
        )
        return admin

    @Logger.io
    async def logout(self, *, admin: AdminEntity) -> None:
        await self.activity_recorder.record(
            admin_id=admin.id,
            action=ActivityAction.LOGOUT,
            description=f'{admin.full_name} signed out',
            metadata={'email': admin.email},
        )
