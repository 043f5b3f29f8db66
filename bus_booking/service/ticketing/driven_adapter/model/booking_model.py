from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import Date, Index, Integer, Numeric, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from bus_booking.platform.database.column_type import UTCDateTime, utc_now
from bus_booking.platform.database.orm_db_setting import Base


_ACTIVE_BOOKING = text("status != 'cancelled'")


class BookingModel(Base):
    __tablename__ = 'booking'
    __table_args__ = (
        # Store-level guard: at most one non-cancelled booking per seat
        Index(
            'uq_booking_active_seat',
            'seat_number',
            unique=True,
            postgresql_where=_ACTIVE_BOOKING,
            sqlite_where=_ACTIVE_BOOKING,
        ),
        Index('ix_booking_created_at_id', 'created_at', 'id'),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)  # UUID7
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    contact_person_name: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_person_phone: Mapped[str] = mapped_column(String(50), nullable=False)
    passenger_class: Mapped[str] = mapped_column(String(50), nullable=False)
    bus_type: Mapped[str] = mapped_column(String(50), nullable=False)
    referral: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    pickup_point_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    destination_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)
    departure_date: Mapped[date] = mapped_column(Date, nullable=False)
    seat_number: Mapped[int] = mapped_column(Integer, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='pending', nullable=False, index=True)
    payment_status: Mapped[str] = mapped_column(String(20), default='pending', nullable=False)
    payment_reference: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utc_now, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, default=utc_now, onupdate=utc_now, nullable=False
    )
