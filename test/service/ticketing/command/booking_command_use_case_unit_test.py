"""
Unit tests for the booking commands

Each command runs in one unit of work: the seat and booking changes commit
together, and nothing is committed when a step fails.
"""

from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Callable
from unittest.mock import AsyncMock, MagicMock, patch

import attrs
import pytest
import uuid_utils.compat as uuid_utils

from bus_booking.platform.exception.exceptions import (
    InvalidTransitionError,
    NotFoundError,
    SeatConflictError,
    SeatUnavailableError,
    ValidationError,
)
from bus_booking.service.inventory.domain.entity.seat_entity import Seat
from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction
from bus_booking.service.shared_kernel.domain.enum.booking_status import BookingStatus
from bus_booking.service.shared_kernel.domain.enum.seat_state import SeatState
from bus_booking.service.ticketing.app.command.approve_booking_use_case import (
    ApproveBookingUseCase,
)
from bus_booking.service.ticketing.app.command.cancel_booking_use_case import (
    CancelBookingUseCase,
)
from bus_booking.service.ticketing.app.command.create_booking_use_case import (
    CreateBookingUseCase,
)
from bus_booking.service.ticketing.app.command.delete_booking_use_case import (
    DeleteBookingUseCase,
)
from bus_booking.service.ticketing.domain.entity.booking_entity import Booking
from bus_booking.service.ticketing.domain.entity.catalog_entity import Destination, PickupPoint


@pytest.fixture
def pickup_point() -> PickupPoint:
    return PickupPoint.create(id=uuid_utils.uuid7(), name='Apowa')


@pytest.fixture
def destination() -> Destination:
    return Destination.create(id=uuid_utils.uuid7(), name='Accra', price=Decimal('40'))


@pytest.fixture
def pending_booking(pickup_point: PickupPoint, destination: Destination) -> Booking:
    return Booking.create(
        id=uuid_utils.uuid7(),
        full_name='Kofi Asante',
        email='kofi@example.com',
        phone='0241234567',
        contact_person_name='Ama Asante',
        contact_person_phone='0209876543',
        passenger_class='Level 100',
        pickup_point_id=pickup_point.id,
        destination_id=destination.id,
        departure_date=date.today() + timedelta(days=7),
        seat_number=5,
        amount=destination.price,
        seat_capacity=31,
    )


def _occupied_by(booking: Booking) -> Seat:
    return Seat(
        seat_number=booking.seat_number,
        state=SeatState.OCCUPIED,
        booking_id=booking.id,
        passenger_name=booking.full_name,
    )


@pytest.mark.unit
class TestCreateBookingUseCase:
    @pytest.fixture
    def mock_catalog_query_repo(
        self, pickup_point: PickupPoint, destination: Destination
    ) -> AsyncMock:
        repo = AsyncMock()
        repo.get_pickup_point = AsyncMock(return_value=pickup_point)
        repo.get_destination = AsyncMock(return_value=destination)
        return repo

    @pytest.fixture
    def use_case(
        self, mock_uow: MagicMock, mock_catalog_query_repo: AsyncMock
    ) -> CreateBookingUseCase:
        mock_uow.booking_command_repo.create = AsyncMock(side_effect=lambda *, booking: booking)
        mock_uow.seat_command_repo.mark_occupied = AsyncMock(
            side_effect=lambda *, seat_number, booking_id, passenger_name: Seat(
                seat_number=seat_number,
                state=SeatState.OCCUPIED,
                booking_id=booking_id,
                passenger_name=passenger_name,
            )
        )
        return CreateBookingUseCase(
            uow=mock_uow, catalog_query_repo=mock_catalog_query_repo, seat_capacity=31
        )

    @pytest.fixture
    def request_kwargs(
        self,
        booking_request: Callable[..., dict[str, Any]],
        pickup_point: PickupPoint,
        destination: Destination,
    ) -> dict[str, Any]:
        return booking_request(pickup_point_id=pickup_point.id, destination_id=destination.id)

    @pytest.mark.asyncio
    async def test_create_booking_success__generates_uuid7(
        self,
        use_case: CreateBookingUseCase,
        mock_uow: MagicMock,
        request_kwargs: dict[str, Any],
    ) -> None:
        test_uuid = uuid_utils.uuid7()
        with patch(
            'bus_booking.service.ticketing.app.command.create_booking_use_case.uuid_utils.uuid7',
            return_value=test_uuid,
        ):
            change = await use_case.create_booking(**request_kwargs)

        assert change.booking.id == test_uuid
        assert change.booking.status == BookingStatus.PENDING
        assert change.seat is not None
        assert (change.seat.state, change.seat.booking_id) == (SeatState.OCCUPIED, test_uuid)
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_seat_is_occupied_before_booking_insert(
        self,
        use_case: CreateBookingUseCase,
        mock_uow: MagicMock,
        request_kwargs: dict[str, Any],
    ) -> None:
        # Given: record call order across both repositories
        call_order: list[str] = []
        mark_occupied = mock_uow.seat_command_repo.mark_occupied.side_effect
        create = mock_uow.booking_command_repo.create.side_effect

        def _mark(**kwargs: Any) -> Seat:
            call_order.append('mark_occupied')
            return mark_occupied(**kwargs)

        def _create(**kwargs: Any) -> Booking:
            call_order.append('create')
            return create(**kwargs)

        mock_uow.seat_command_repo.mark_occupied.side_effect = _mark
        mock_uow.booking_command_repo.create.side_effect = _create

        # When
        await use_case.create_booking(**request_kwargs)

        # Then
        assert call_order == ['mark_occupied', 'create']

    @pytest.mark.asyncio
    async def test_amount_comes_from_destination_price(
        self,
        use_case: CreateBookingUseCase,
        request_kwargs: dict[str, Any],
    ) -> None:
        change = await use_case.create_booking(**request_kwargs)

        assert change.booking.amount == Decimal('40.00')

    @pytest.mark.asyncio
    async def test_taken_seat_raises_seat_conflict(
        self,
        use_case: CreateBookingUseCase,
        mock_uow: MagicMock,
        request_kwargs: dict[str, Any],
    ) -> None:
        mock_uow.seat_command_repo.mark_occupied.side_effect = SeatUnavailableError(5)

        with pytest.raises(SeatConflictError):
            await use_case.create_booking(**request_kwargs)

        mock_uow.booking_command_repo.create.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_inactive_destination_is_rejected(
        self,
        use_case: CreateBookingUseCase,
        mock_uow: MagicMock,
        mock_catalog_query_repo: AsyncMock,
        destination: Destination,
        request_kwargs: dict[str, Any],
    ) -> None:
        mock_catalog_query_repo.get_destination.return_value = destination.deactivate()

        with pytest.raises(ValidationError, match='no longer offered'):
            await use_case.create_booking(**request_kwargs)

        mock_uow.seat_command_repo.mark_occupied.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_pickup_point(
        self,
        use_case: CreateBookingUseCase,
        mock_catalog_query_repo: AsyncMock,
        request_kwargs: dict[str, Any],
    ) -> None:
        mock_catalog_query_repo.get_pickup_point.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.create_booking(**request_kwargs)

    @pytest.mark.asyncio
    async def test_invalid_request_touches_no_seat(
        self,
        use_case: CreateBookingUseCase,
        mock_uow: MagicMock,
        request_kwargs: dict[str, Any],
    ) -> None:
        request_kwargs['seat_number'] = 32

        with pytest.raises(ValidationError):
            await use_case.create_booking(**request_kwargs)

        mock_uow.seat_command_repo.mark_occupied.assert_not_awaited()


@pytest.mark.unit
class TestApproveBookingUseCase:
    @pytest.fixture
    def use_case(
        self, mock_uow: MagicMock, mock_activity_recorder: AsyncMock
    ) -> ApproveBookingUseCase:
        return ApproveBookingUseCase(uow=mock_uow, activity_recorder=mock_activity_recorder)

    @pytest.mark.asyncio
    async def test_approve_pending(
        self,
        use_case: ApproveBookingUseCase,
        mock_uow: MagicMock,
        mock_activity_recorder: AsyncMock,
        pending_booking: Booking,
        admin_id: Any,
    ) -> None:
        approved = attrs.evolve(pending_booking, status=BookingStatus.APPROVED)
        mock_uow.booking_command_repo.get_by_id = AsyncMock(return_value=pending_booking)
        mock_uow.booking_command_repo.update_status = AsyncMock(return_value=approved)
        mock_uow.seat_command_repo.get = AsyncMock(return_value=_occupied_by(pending_booking))

        change = await use_case.execute(booking_id=pending_booking.id, admin_id=admin_id)

        assert change.booking.status == BookingStatus.APPROVED
        assert change.seat.state == SeatState.OCCUPIED
        assert (
            mock_uow.booking_command_repo.update_status.await_args.kwargs['expected_status']
            == BookingStatus.PENDING
        )
        mock_uow.commit.assert_awaited_once()
        kwargs = mock_activity_recorder.record.await_args.kwargs
        assert kwargs['action'] == ActivityAction.BOOKING_APPROVED
        assert kwargs['metadata']['previous_status'] == 'pending'
        assert kwargs['metadata']['new_status'] == 'approved'

    @pytest.mark.asyncio
    async def test_approve_cancelled_is_rejected(
        self,
        use_case: ApproveBookingUseCase,
        mock_uow: MagicMock,
        mock_activity_recorder: AsyncMock,
        pending_booking: Booking,
        admin_id: Any,
    ) -> None:
        mock_uow.booking_command_repo.get_by_id = AsyncMock(return_value=pending_booking.cancel())

        with pytest.raises(InvalidTransitionError):
            await use_case.execute(booking_id=pending_booking.id, admin_id=admin_id)

        mock_uow.booking_command_repo.update_status.assert_not_awaited()
        mock_activity_recorder.record.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_lost_compare_and_set(
        self,
        use_case: ApproveBookingUseCase,
        mock_uow: MagicMock,
        pending_booking: Booking,
        admin_id: Any,
    ) -> None:
        mock_uow.booking_command_repo.get_by_id = AsyncMock(return_value=pending_booking)
        mock_uow.booking_command_repo.update_status = AsyncMock(return_value=None)

        with pytest.raises(InvalidTransitionError, match='concurrently'):
            await use_case.execute(booking_id=pending_booking.id, admin_id=admin_id)

        mock_uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_booking(
        self, use_case: ApproveBookingUseCase, mock_uow: MagicMock, admin_id: Any
    ) -> None:
        mock_uow.booking_command_repo.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError):
            await use_case.execute(booking_id=uuid_utils.uuid7(), admin_id=admin_id)


@pytest.mark.unit
class TestCancelBookingUseCase:
    @pytest.fixture
    def use_case(
        self, mock_uow: MagicMock, mock_activity_recorder: AsyncMock
    ) -> CancelBookingUseCase:
        return CancelBookingUseCase(uow=mock_uow, activity_recorder=mock_activity_recorder)

    @pytest.mark.asyncio
    @pytest.mark.parametrize('status', [BookingStatus.PENDING, BookingStatus.APPROVED])
    async def test_cancel_releases_seat_of_this_booking(
        self,
        use_case: CancelBookingUseCase,
        mock_uow: MagicMock,
        mock_activity_recorder: AsyncMock,
        pending_booking: Booking,
        admin_id: Any,
        status: BookingStatus,
    ) -> None:
        booking = attrs.evolve(pending_booking, status=status)
        mock_uow.booking_command_repo.get_by_id = AsyncMock(return_value=booking)
        mock_uow.booking_command_repo.update_status = AsyncMock(
            return_value=attrs.evolve(booking, status=BookingStatus.CANCELLED)
        )
        mock_uow.seat_command_repo.release = AsyncMock(return_value=Seat(seat_number=5))

        change = await use_case.execute(booking_id=booking.id, admin_id=admin_id)

        assert change.booking.status == BookingStatus.CANCELLED
        assert change.seat.state == SeatState.AVAILABLE
        mock_uow.seat_command_repo.release.assert_awaited_once_with(
            seat_number=5, booking_id=booking.id
        )
        mock_uow.commit.assert_awaited_once()
        kwargs = mock_activity_recorder.record.await_args.kwargs
        assert kwargs['action'] == ActivityAction.BOOKING_REJECTED
        assert kwargs['metadata']['previous_status'] == status.value

    @pytest.mark.asyncio
    async def test_cancel_cancelled_is_rejected(
        self,
        use_case: CancelBookingUseCase,
        mock_uow: MagicMock,
        pending_booking: Booking,
        admin_id: Any,
    ) -> None:
        mock_uow.booking_command_repo.get_by_id = AsyncMock(return_value=pending_booking.cancel())

        with pytest.raises(InvalidTransitionError):
            await use_case.execute(booking_id=pending_booking.id, admin_id=admin_id)

        mock_uow.seat_command_repo.release.assert_not_awaited()


@pytest.mark.unit
class TestDeleteBookingUseCase:
    @pytest.fixture
    def use_case(
        self, mock_uow: MagicMock, mock_activity_recorder: AsyncMock
    ) -> DeleteBookingUseCase:
        return DeleteBookingUseCase(uow=mock_uow, activity_recorder=mock_activity_recorder)

    @pytest.mark.asyncio
    async def test_delete_active_booking_releases_seat(
        self,
        use_case: DeleteBookingUseCase,
        mock_uow: MagicMock,
        mock_activity_recorder: AsyncMock,
        pending_booking: Booking,
        admin_id: Any,
    ) -> None:
        mock_uow.booking_command_repo.get_by_id = AsyncMock(return_value=pending_booking)
        mock_uow.booking_command_repo.delete = AsyncMock(return_value=True)
        mock_uow.seat_command_repo.release = AsyncMock(return_value=Seat(seat_number=5))

        change = await use_case.execute(booking_id=pending_booking.id, admin_id=admin_id)

        assert change.booking == pending_booking
        assert change.seat.state == SeatState.AVAILABLE
        mock_uow.seat_command_repo.release.assert_awaited_once_with(
            seat_number=5, booking_id=pending_booking.id
        )
        mock_uow.commit.assert_awaited_once()
        kwargs = mock_activity_recorder.record.await_args.kwargs
        assert kwargs['action'] == ActivityAction.BOOKING_DELETED
        assert kwargs['metadata']['new_status'] == 'deleted'

    @pytest.mark.asyncio
    async def test_delete_cancelled_booking_leaves_seat_alone(
        self,
        use_case: DeleteBookingUseCase,
        mock_uow: MagicMock,
        pending_booking: Booking,
        admin_id: Any,
    ) -> None:
        mock_uow.booking_command_repo.get_by_id = AsyncMock(return_value=pending_booking.cancel())
        mock_uow.booking_command_repo.delete = AsyncMock(return_value=True)
        mock_uow.seat_command_repo.get = AsyncMock(return_value=Seat(seat_number=5))

        await use_case.execute(booking_id=pending_booking.id, admin_id=admin_id)

        mock_uow.seat_command_repo.release.assert_not_awaited()
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_unknown_booking(
        self,
        use_case: DeleteBookingUseCase,
        mock_uow: MagicMock,
        mock_activity_recorder: AsyncMock,
        admin_id: Any,
    ) -> None:
        mock_uow.booking_command_repo.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError):
            await use_case.execute(booking_id=uuid_utils.uuid7(), admin_id=admin_id)

        mock_activity_recorder.record.assert_not_awaited()
