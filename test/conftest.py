"""
Test Configuration and Fixtures

This module provides:
- Environment setup (SQLite database, log dir) before any application import
- A fresh SQLite database per test for integration tests
- Mocked unit of work / recorder fixtures for unit tests
- Catalog and booking request builders shared by the service tests

Architecture:
- Unit tests (*_unit_test.py): mocked collaborators, no database
- Integration tests (*_integration_test.py): real repositories on SQLite
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# settings is read at import time by the logging config and the DI container
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    test_db_dir = Path(tempfile.mkdtemp(prefix=f'bus_booking_{worker_id}_'))
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{test_db_dir / "api_test.db"}'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['DEBUG'] = 'true'
    os.environ['SEAT_CAPACITY'] = '31'
    os.environ['ALLOW_ADMIN_REGISTRATION'] = 'true'
    os.environ['INITIALIZE_SEATS_ON_STARTUP'] = 'true'
    os.environ['SEED_DEFAULT_CATALOG'] = 'true'
    os.environ['PAYMENT_WEBHOOK_SECRET'] = 'test_payment_webhook_secret'
    os.environ['BACKEND_CORS_ORIGINS'] = '[]'


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Callable  # noqa: E402
from datetime import date, timedelta  # noqa: E402
from decimal import Decimal  # noqa: E402
from typing import Any  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import uuid_utils.compat as uuid_utils  # noqa: E402

from bus_booking.platform.database.orm_db_setting import Database  # noqa: E402
from bus_booking.platform.database.unit_of_work import SqlAlchemyUnitOfWork  # noqa: E402
from bus_booking.service.audit.app.command.record_activity_use_case import (  # noqa: E402
    RecordActivityUseCase,
)
from bus_booking.service.audit.driven_adapter.repo.activity_repo_impl import (  # noqa: E402
    ActivityRepoImpl,
)
from bus_booking.service.ticketing.domain.entity.catalog_entity import (  # noqa: E402
    Destination,
    PickupPoint,
)
from bus_booking.service.ticketing.driven_adapter.repo.catalog_command_repo_impl import (  # noqa: E402
    CatalogCommandRepoImpl,
)


# =============================================================================
# Database Fixtures (integration)
# =============================================================================
@pytest.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    db = Database(url=f'sqlite+aiosqlite:///{tmp_path / "bus_booking.db"}')
    await db.create_db_and_tables()
    yield db
    await db.drop_all()
    await db.dispose()


@pytest.fixture
def uow_factory(database: Database) -> Callable[[], SqlAlchemyUnitOfWork]:
    def _make() -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(session_factory=database.session)

    return _make


@pytest.fixture
def activity_repo(database: Database) -> ActivityRepoImpl:
    return ActivityRepoImpl(session_factory=database.session)


@pytest.fixture
def activity_recorder(activity_repo: ActivityRepoImpl) -> RecordActivityUseCase:
    return RecordActivityUseCase(activity_repo=activity_repo)


@pytest.fixture
async def catalog(database: Database) -> dict[str, Any]:
    """One active pickup point and one active destination priced at 40.00"""
    repo = CatalogCommandRepoImpl(session_factory=database.session)
    pickup_point = await repo.create_pickup_point(
        pickup_point=PickupPoint.create(id=uuid_utils.uuid7(), name='Apowa')
    )
    destination = await repo.create_destination(
        destination=Destination.create(id=uuid_utils.uuid7(), name='Accra', price=Decimal('40'))
    )
    return {'pickup_point': pickup_point, 'destination': destination}


# =============================================================================
# Mock Fixtures (unit)
# =============================================================================
@pytest.fixture
def mock_uow() -> MagicMock:
    """Unit of work double usable in `async with`; repos are AsyncMocks"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=None)
    uow.commit = AsyncMock()
    uow.seat_command_repo = AsyncMock()
    uow.booking_command_repo = AsyncMock()
    return uow


@pytest.fixture
def mock_activity_recorder() -> AsyncMock:
    recorder = AsyncMock()
    recorder.record = AsyncMock(return_value=None)
    return recorder


@pytest.fixture
def admin_id() -> Any:
    return uuid_utils.uuid7()


# =============================================================================
# Booking Request Builder
# =============================================================================
@pytest.fixture
def booking_request() -> Callable[..., dict[str, Any]]:
    """Keyword arguments for CreateBookingUseCase.create_booking"""

    def _build(*, pickup_point_id: Any, destination_id: Any, **overrides: Any) -> dict[str, Any]:
        request = {
            'full_name': 'Kofi Asante',
            'email': 'kofi@example.com',
            'phone': '0241234567',
            'contact_person_name': 'Ama Asante',
            'contact_person_phone': '0209876543',
            'passenger_class': 'Level 100',
            'pickup_point_id': pickup_point_id,
            'destination_id': destination_id,
            'departure_date': date.today() + timedelta(days=7),
            'seat_number': 5,
        }
        request.update(overrides)
        return request

    return _build
