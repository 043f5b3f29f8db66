from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Cookie, Depends

from bus_booking.platform.config.core_setting import settings
from bus_booking.platform.config.di import Container
from bus_booking.service.identity.domain.entity.admin_entity import AdminEntity
from bus_booking.service.identity.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


@inject
async def require_admin(
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    token: Optional[str] = Cookie(None, alias=settings.AUTH_COOKIE_NAME),
) -> AdminEntity:
    """Current admin from the session cookie (stateless, no DB query)"""
    return jwt_auth.get_current_admin_from_jwt(token)
