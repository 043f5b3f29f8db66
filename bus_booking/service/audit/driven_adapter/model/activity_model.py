from datetime import datetime
from typing import Any, Dict
from uuid import UUID

from sqlalchemy import JSON, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from bus_booking.platform.database.column_type import UTCDateTime, utc_now
from bus_booking.platform.database.orm_db_setting import Base


class ActivityModel(Base):
    __tablename__ = 'admin_activity'
    __table_args__ = (Index('ix_admin_activity_created_at_id', 'created_at', 'id'),)

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    admin_id: Mapped[UUID] = mapped_column(Uuid, nullable=False, index=True)
    action: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    # `metadata` is reserved on declarative classes
    details: Mapped[Dict[str, Any]] = mapped_column('metadata', JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utc_now, nullable=False)
