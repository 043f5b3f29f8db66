"""
HTTP mapping of the error hierarchy

Every error body is `{"detail": ...}`. Business errors carry their own status
code; malformed requests are 400; anything unexpected is a 500 with the
traceback kept in the log only.
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bus_booking.platform.exception.exceptions import CustomBaseError, StoreUnavailableError
from bus_booking.platform.logging.loguru_io import Logger


# Seconds a client should wait before retrying after a store outage
STORE_RETRY_AFTER = '1'


def _detail(
    status_code: int, detail: object, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={'detail': detail}, headers=headers)


async def handle_business_error(request: Request, exc: CustomBaseError) -> JSONResponse:
    if isinstance(exc, StoreUnavailableError):
        Logger.base.warning(f'🗄️  [STORE] {request.method} {request.url.path}: {exc.message}')
        return _detail(exc.status_code, exc.message, {'Retry-After': STORE_RETRY_AFTER})
    return _detail(exc.status_code, exc.message)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _detail(status.HTTP_400_BAD_REQUEST, jsonable_encoder(exc.errors()))


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    return _detail(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.opt(exception=exc).error(
        f'💥 [UNHANDLED] {request.method} {request.url.path}: {type(exc).__name__}'
    )
    return _detail(status.HTTP_500_INTERNAL_SERVER_ERROR, 'Internal server error')


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CustomBaseError, handle_business_error)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError, handle_request_validation  # type: ignore[arg-type]
    )
    app.add_exception_handler(ValueError, handle_value_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected)
