"""
FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from bus_booking.platform.config.core_setting import settings
from bus_booking.platform.constant.route_constant import (
    ACTIVITY_BASE,
    ADMIN_BASE,
    BOOKING_BASE,
    DESTINATION_BASE,
    PAYMENT_BASE,
    PICKUP_POINT_BASE,
    SEAT_BASE,
)
from bus_booking.platform.exception.exception_handlers import register_exception_handlers
from bus_booking.service.audit.driving_adapter.http_controller.activity_controller import (
    router as activity_router,
)
from bus_booking.service.identity.driving_adapter.http_controller.admin_controller import (
    router as admin_router,
)
from bus_booking.service.inventory.driving_adapter.http_controller.seat_controller import (
    router as seat_router,
)
from bus_booking.service.ticketing.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)
from bus_booking.service.ticketing.driving_adapter.http_controller.destination_controller import (
    router as destination_router,
)
from bus_booking.service.ticketing.driving_adapter.http_controller.payment_controller import (
    router as payment_router,
)
from bus_booking.service.ticketing.driving_adapter.http_controller.pickup_point_controller import (
    router as pickup_point_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Bus booking admin: seat registry, booking ledger and activity log',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    app.include_router(admin_router, prefix=ADMIN_BASE, tags=['admin'])
    app.include_router(seat_router, prefix=SEAT_BASE, tags=['seat'])
    app.include_router(booking_router, prefix=BOOKING_BASE, tags=['booking'])
    app.include_router(payment_router, prefix=PAYMENT_BASE, tags=['payment'])
    app.include_router(pickup_point_router, prefix=PICKUP_POINT_BASE, tags=['catalog'])
    app.include_router(destination_router, prefix=DESTINATION_BASE, tags=['catalog'])
    app.include_router(activity_router, prefix=ACTIVITY_BASE, tags=['activity'])

    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    """Register health and metrics endpoints."""

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    @app.get('/metrics')
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
