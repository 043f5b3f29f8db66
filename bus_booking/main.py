"""
Bus Booking Admin - FastAPI Application

Run with:
    granian bus_booking.main:app --interface asgi --host 0.0.0.0 --port 8000
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from bus_booking.platform.app_factory import create_app
from bus_booking.platform.config.di import container
from bus_booking.platform.config.wire_modules import WIRE_MODULES
from bus_booking.platform.logging.loguru_io import Logger
from bus_booking.service.inventory.app.command.initialize_seats_use_case import (
    InitializeSeatsUseCase,
)
from bus_booking.service.ticketing.app.command.seed_default_catalog_use_case import (
    SeedDefaultCatalogUseCase,
)


async def bootstrap_data() -> None:
    """Seat registry and default catalog; both steps are idempotent across restarts and workers"""
    config = container.config_service()

    if config.INITIALIZE_SEATS_ON_STARTUP:
        await InitializeSeatsUseCase(
            uow=container.unit_of_work(),
            seat_query_repo=container.seat_query_repo(),
            activity_recorder=container.activity_recorder(),
        ).execute(capacity=config.SEAT_CAPACITY)
        Logger.base.info(f'💺 [Bus Booking] Seat registry ready ({config.SEAT_CAPACITY} seats)')

    if config.SEED_DEFAULT_CATALOG:
        await SeedDefaultCatalogUseCase(
            catalog_command_repo=container.catalog_command_repo(),
            catalog_query_repo=container.catalog_query_repo(),
        ).execute()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Bus Booking] Starting up...')

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Bus Booking] Dependency injection wired')

    database = container.database()
    await database.create_db_and_tables()
    Logger.base.info('🗄️  [Bus Booking] Database tables ready')

    await bootstrap_data()
    Logger.base.info('✅ [Bus Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Bus Booking] Shutting down...')
    await database.dispose()
    Logger.base.info('🗄️  [Bus Booking] Database engine disposed')

    container.unwire()
    Logger.base.info('👋 [Bus Booking] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/', include_in_schema=False)
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
