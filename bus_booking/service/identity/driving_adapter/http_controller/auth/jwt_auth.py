"""
Admin session tokens

The JWT carries everything needed to rebuild the AdminEntity, so protected
endpoints never query the database to authenticate a request.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional
from uuid import UUID

import jwt

from bus_booking.platform.config.core_setting import settings
from bus_booking.platform.exception.exceptions import AuthenticationFailedError
from bus_booking.service.identity.domain.entity.admin_entity import AdminEntity


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_days = settings.ACCESS_TOKEN_EXPIRE_DAYS

    @property
    def max_age_seconds(self) -> int:
        return self.token_expire_days * 24 * 60 * 60

    def create_jwt_token(self, admin: AdminEntity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(admin.id),
            'exp': now + timedelta(days=self.token_expire_days),
            'iat': now,
            'email': admin.email,
            'full_name': admin.full_name,
            'is_active': admin.is_active,
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as e:
            raise AuthenticationFailedError('Invalid token') from e

    def get_current_admin_from_jwt(self, token: Optional[str]) -> AdminEntity:
        if not token:
            raise AuthenticationFailedError('Not authenticated')

        payload = self.decode_jwt_token(token)

        admin_id = payload.get('sub')
        email = payload.get('email')
        full_name = payload.get('full_name')
        is_active = payload.get('is_active')
        if not admin_id or not email or not full_name or is_active is None:
            raise AuthenticationFailedError('Invalid token')

        try:
            admin = AdminEntity(
                id=UUID(admin_id), email=email, full_name=full_name, is_active=is_active
            )
        except ValueError as e:
            raise AuthenticationFailedError('Invalid token') from e

        admin.validate_active()
        return admin
