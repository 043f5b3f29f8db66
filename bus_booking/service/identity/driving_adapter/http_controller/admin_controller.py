from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from bus_booking.platform.config.core_setting import settings
from bus_booking.platform.config.di import Container
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.identity.app.command.authenticate_admin_use_case import (
    AuthenticateAdminUseCase,
)
from bus_booking.service.identity.app.command.register_admin_use_case import (
    RegisterAdminUseCase,
)
from bus_booking.service.identity.domain.entity.admin_entity import AdminEntity
from bus_booking.service.identity.driving_adapter.http_controller.auth.admin_auth import (
    require_admin,
)
from bus_booking.service.identity.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from bus_booking.service.identity.driving_adapter.http_controller.schema.admin_schema import (
    AdminResponse,
    CreateAdminRequest,
    LoginRequest,
)


router = APIRouter()


def _to_response(admin: AdminEntity) -> AdminResponse:
    return AdminResponse(
        id=admin.id, email=admin.email, full_name=admin.full_name, is_active=admin.is_active
    )


@router.post('', response_model=AdminResponse, status_code=status.HTTP_201_CREATED)
@Logger.io
async def register_admin(
    request: CreateAdminRequest,
    use_case: RegisterAdminUseCase = Depends(RegisterAdminUseCase.depends),
) -> AdminResponse:
    admin = await use_case.register(
        email=request.email, password=request.password, full_name=request.full_name
    )
    return _to_response(admin)


@router.post('/login', response_model=AdminResponse)
@Logger.io
@inject
async def login(
    response: Response,
    request: LoginRequest,
    use_case: AuthenticateAdminUseCase = Depends(AuthenticateAdminUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> AdminResponse:
    admin = await use_case.login(email=request.email, password=request.password)

    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=jwt_auth.create_jwt_token(admin),
        max_age=jwt_auth.max_age_seconds,
        httponly=True,
        samesite='lax',
        secure=settings.AUTH_COOKIE_SECURE,
    )
    return _to_response(admin)


@router.post('/logout', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def logout(
    current_admin: AdminEntity = Depends(require_admin),
    use_case: AuthenticateAdminUseCase = Depends(AuthenticateAdminUseCase.depends),
) -> Response:
    await use_case.logout(admin=current_admin)
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(key=settings.AUTH_COOKIE_NAME, httponly=True, samesite='lax')
    return response


@router.get('/me', response_model=AdminResponse)
@Logger.io
async def get_me(current_admin: AdminEntity = Depends(require_admin)) -> AdminResponse:
    return _to_response(current_admin)
