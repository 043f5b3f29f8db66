from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from bus_booking.platform.database.column_type import UTCDateTime, utc_now
from bus_booking.platform.database.orm_db_setting import Base


class AdminModel(Base):
    __tablename__ = 'admin'

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utc_now, nullable=False)

    def __repr__(self):
        return f'<AdminModel(id={self.id}, email={self.email})>'
