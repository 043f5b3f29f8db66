from datetime import datetime
from typing import Optional
from uuid import UUID

import attrs
from pydantic import SecretStr

from bus_booking.platform.exception.exceptions import AuthenticationFailedError, ValidationError
from bus_booking.service.identity.app.interface.i_password_hasher import IPasswordHasher


MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_BYTES = 72  # bcrypt ignores anything past 72 bytes


@attrs.define
class AdminEntity:
    id: UUID
    email: str
    full_name: str
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    is_active: bool = True
    created_at: Optional[datetime] = None

    def validate_active(self) -> None:
        if not self.is_active:
            raise AuthenticationFailedError('Account is disabled')

    def set_password(self, *, plain_password: SecretStr, password_hasher: IPasswordHasher) -> None:
        raw = plain_password.get_secret_value()
        if len(raw) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f'password must be at least {MIN_PASSWORD_LENGTH} characters long'
            )
        if len(raw.encode('utf-8')) > MAX_PASSWORD_BYTES:
            raise ValidationError(f'password must be at most {MAX_PASSWORD_BYTES} bytes long')

        self.hashed_password = password_hasher.hash_password(plain_password=plain_password)
