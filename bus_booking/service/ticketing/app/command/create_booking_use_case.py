from datetime import date
from decimal import Decimal
import time
from typing import Optional, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
import uuid_utils.compat as uuid_utils

from bus_booking.platform.config.core_setting import Settings
from bus_booking.platform.config.di import Container
from bus_booking.platform.database.unit_of_work import AbstractUnitOfWork
from bus_booking.platform.exception.exceptions import (
    NotFoundError,
    SeatConflictError,
    SeatUnavailableError,
    ValidationError,
)
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.platform.metrics.booking_metrics import metrics
from bus_booking.service.ticketing.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from bus_booking.service.ticketing.domain.entity.booking_entity import Booking
from bus_booking.service.ticketing.domain.value_object.booking_seat_change import (
    BookingSeatChange,
)


class CreateBookingUseCase:
    """
    Create booking use case (passenger side)

    Flow:
    1. Resolve pickup point and destination; the fare is the destination's current price
    2. Validate the request and build the pending booking (UUID7 id)
    3. One unit of work:
       - conditional UPDATE of the seat WHERE state = 'available' (first write,
         so concurrent requests for the same seat are serialized by the store)
       - booking INSERT
       - commit
    4. Return the booking together with the occupied seat

    Of K concurrent requests for one seat exactly one commits; the others get
    SeatConflictError and leave nothing behind.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        catalog_query_repo: ICatalogQueryRepo,
        seat_capacity: int,
    ) -> None:
        self.uow = uow
        self.catalog_query_repo = catalog_query_repo
        self.seat_capacity = seat_capacity

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        catalog_query_repo: ICatalogQueryRepo = Depends(Provide[Container.catalog_query_repo]),
        config_service: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            uow=uow,
            catalog_query_repo=catalog_query_repo,
            seat_capacity=config_service.SEAT_CAPACITY,
        )

    @Logger.io
    async def create_booking(
        self,
        *,
        full_name: str,
        email: str,
        phone: str,
        contact_person_name: str,
        contact_person_phone: str,
        passenger_class: str,
        pickup_point_id: UUID,
        destination_id: UUID,
        departure_date: date,
        seat_number: int,
        bus_type: Optional[str] = None,
        referral: Optional[str] = None,
    ) -> BookingSeatChange:
        pickup_point = await self.catalog_query_repo.get_pickup_point(
            pickup_point_id=pickup_point_id
        )
        if not pickup_point:
            raise NotFoundError('Pickup point not found')
        if not pickup_point.active:
            raise ValidationError(f'Pickup point "{pickup_point.name}" is no longer offered')

        destination = await self.catalog_query_repo.get_destination(
            destination_id=destination_id
        )
        if not destination:
            raise NotFoundError('Destination not found')
        if not destination.active:
            raise ValidationError(f'Destination "{destination.name}" is no longer offered')

        booking = Booking.create(
            id=uuid_utils.uuid7(),
            full_name=full_name,
            email=email,
            phone=phone,
            contact_person_name=contact_person_name,
            contact_person_phone=contact_person_phone,
            passenger_class=passenger_class,
            pickup_point_id=pickup_point.id,
            destination_id=destination.id,
            departure_date=departure_date,
            seat_number=seat_number,
            amount=Decimal(destination.price),
            seat_capacity=self.seat_capacity,
            bus_type=bus_type,
            referral=referral,
        )

        start = time.perf_counter()
        try:
            async with self.uow:
                seat = await self.uow.seat_command_repo.mark_occupied(
                    seat_number=booking.seat_number,
                    booking_id=booking.id,
                    passenger_name=booking.full_name,
                )
                created = await self.uow.booking_command_repo.create(booking=booking)
                await self.uow.commit()
        except SeatUnavailableError as e:
            metrics.record_booking_created(
                result='seat_conflict', duration=time.perf_counter() - start
            )
            raise SeatConflictError(f'Seat {booking.seat_number} is no longer available') from e
        except SeatConflictError:
            metrics.record_booking_created(
                result='seat_conflict', duration=time.perf_counter() - start
            )
            raise

        metrics.record_booking_created(result='created', duration=time.perf_counter() - start)
        Logger.base.info(
            f'🎫 [CREATE-BOOKING] Booking {created.id} holds seat {created.seat_number}'
        )
        return BookingSeatChange(booking=created, seat=seat)
