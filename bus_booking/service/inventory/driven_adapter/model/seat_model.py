from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import CheckConstraint, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from bus_booking.platform.database.column_type import UTCDateTime, utc_now
from bus_booking.platform.database.orm_db_setting import Base


class SeatModel(Base):
    __tablename__ = 'seat_status'
    __table_args__ = (
        CheckConstraint(
            "(state = 'occupied') = (booking_id IS NOT NULL)",
            name='ck_seat_status_booking_iff_occupied',
        ),
    )

    seat_number: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    state: Mapped[str] = mapped_column(String(20), default='available', nullable=False)
    booking_id: Mapped[Optional[UUID]] = mapped_column(Uuid, nullable=True, unique=True)
    passenger_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utc_now, nullable=False)
