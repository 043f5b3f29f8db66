"""
Unit tests for the activity recorder

The recorder is best effort: whatever goes wrong while building or storing a
record, the audited operation that called it must not see an exception.
"""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
import uuid_utils.compat as uuid_utils

from bus_booking.platform.exception.exceptions import StoreUnavailableError, ValidationError
from bus_booking.service.audit.app.command.record_activity_use_case import RecordActivityUseCase
from bus_booking.service.audit.app.query.list_activities_use_case import ListActivitiesUseCase
from bus_booking.service.audit.domain.entity.activity_entity import (
    ActivityRecord,
    normalize_metadata,
)
from bus_booking.service.shared_kernel.domain.enum.activity_action import ActivityAction


@pytest.mark.unit
class TestNormalizeMetadata:
    def test_scalars_are_kept_and_special_types_flattened(self) -> None:
        when = datetime(2025, 2, 1, 8, 0, tzinfo=timezone.utc)

        normalized = normalize_metadata(
            {'seat_number': 4, 'name': 'Accra', 'ok': True, 'price': Decimal('40.50'), 'at': when}
        )

        assert normalized == {
            'seat_number': 4,
            'name': 'Accra',
            'ok': True,
            'price': 40.5,
            'at': '2025-02-01T08:00:00+00:00',
        }

    def test_missing_metadata_is_empty(self) -> None:
        assert normalize_metadata(None) == {}

    @pytest.mark.parametrize('value', [None, ['a'], {'nested': 1}])
    def test_non_scalar_values_are_rejected(self, value: object) -> None:
        with pytest.raises(ValidationError):
            normalize_metadata({'key': value})

    def test_blank_description_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ActivityRecord.create(
                id=uuid_utils.uuid7(),
                admin_id=uuid_utils.uuid7(),
                action=ActivityAction.LOGIN,
                description='  ',
            )


@pytest.mark.unit
class TestRecordActivityUseCase:
    @pytest.fixture
    def mock_activity_repo(self) -> AsyncMock:
        repo = AsyncMock()
        repo.append = AsyncMock(side_effect=lambda *, record: record)
        return repo

    @pytest.fixture
    def recorder(self, mock_activity_repo: AsyncMock) -> RecordActivityUseCase:
        return RecordActivityUseCase(activity_repo=mock_activity_repo)

    @pytest.mark.asyncio
    async def test_record_appends_normalized_entry(
        self, recorder: RecordActivityUseCase, mock_activity_repo: AsyncMock
    ) -> None:
        admin_id = uuid_utils.uuid7()

        await recorder.record(
            admin_id=admin_id,
            action=ActivityAction.SEAT_BLOCKED,
            description='Blocked seat 9',
            metadata={'seat_number': 9},
        )

        mock_activity_repo.append.assert_awaited_once()
        record = mock_activity_repo.append.await_args.kwargs['record']
        assert record.admin_id == admin_id
        assert record.action == ActivityAction.SEAT_BLOCKED
        assert record.metadata == {'seat_number': 9}
        assert record.created_at is not None

    @pytest.mark.asyncio
    async def test_store_failure_is_swallowed(
        self, recorder: RecordActivityUseCase, mock_activity_repo: AsyncMock
    ) -> None:
        mock_activity_repo.append.side_effect = StoreUnavailableError()

        # When/Then: no exception reaches the caller
        await recorder.record(
            admin_id=uuid_utils.uuid7(),
            action=ActivityAction.LOGIN,
            description='Admin signed in',
        )

        mock_activity_repo.append.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invalid_metadata_is_swallowed_without_append(
        self, recorder: RecordActivityUseCase, mock_activity_repo: AsyncMock
    ) -> None:
        await recorder.record(
            admin_id=uuid_utils.uuid7(),
            action=ActivityAction.DATA_EXPORTED,
            description='Exported bookings',
            metadata={'filters': {'status': 'pending'}},  # type: ignore[dict-item]
        )

        mock_activity_repo.append.assert_not_awaited()


@pytest.mark.unit
class TestListActivitiesUseCase:
    @pytest.fixture
    def mock_activity_repo(self) -> AsyncMock:
        repo = AsyncMock()
        repo.list_recent = AsyncMock(return_value=[])
        return repo

    @pytest.mark.asyncio
    async def test_passes_limit_and_offset(self, mock_activity_repo: AsyncMock) -> None:
        use_case = ListActivitiesUseCase(activity_repo=mock_activity_repo, max_limit=200)

        await use_case.execute(limit=20, offset=40)

        mock_activity_repo.list_recent.assert_awaited_once_with(limit=20, offset=40)

    @pytest.mark.asyncio
    @pytest.mark.parametrize('limit,offset', [(0, 0), (201, 0), (10, -1)])
    async def test_out_of_range_paging_is_rejected(
        self, mock_activity_repo: AsyncMock, limit: int, offset: int
    ) -> None:
        use_case = ListActivitiesUseCase(activity_repo=mock_activity_repo, max_limit=200)

        with pytest.raises(ValidationError):
            await use_case.execute(limit=limit, offset=offset)

        mock_activity_repo.list_recent.assert_not_awaited()
