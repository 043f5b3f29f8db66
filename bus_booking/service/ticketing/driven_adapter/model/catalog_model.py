from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Boolean, Index, Numeric, String, Uuid, func, text
from sqlalchemy.orm import Mapped, mapped_column

from bus_booking.platform.database.column_type import UTCDateTime, utc_now
from bus_booking.platform.database.orm_db_setting import Base


_ACTIVE = text('active')


class PickupPointModel(Base):
    __tablename__ = 'pickup_point'

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utc_now, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, default=utc_now, onupdate=utc_now, nullable=False
    )


class DestinationModel(Base):
    __tablename__ = 'destination'

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=utc_now, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime, default=utc_now, onupdate=utc_now, nullable=False
    )


# Names are unique among active entries, case-insensitively
Index(
    'uq_pickup_point_active_name',
    func.lower(PickupPointModel.name),
    unique=True,
    postgresql_where=_ACTIVE,
    sqlite_where=_ACTIVE,
)
Index(
    'uq_destination_active_name',
    func.lower(DestinationModel.name),
    unique=True,
    postgresql_where=_ACTIVE,
    sqlite_where=_ACTIVE,
)
