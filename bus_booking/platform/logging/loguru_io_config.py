"""
Loguru sinks for the bus booking service

Every line carries the service context and, for `Logger.io` calls, the call
target and the elapsed time since the outermost decorated call started.
Records from the standard `logging` module (granian, SQLAlchemy, uvicorn-style
access logs) are routed through the same sinks.
"""

from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
import logging
import os
from pathlib import Path
import sys

from loguru import logger as loguru_logger

from bus_booking.platform.config.core_setting import settings
from bus_booking.platform.constant.path import LOG_DIR
from bus_booking.platform.logging.service_context import get_service_context


class LogExtra(StrEnum):
    SERVICE = 'service'
    TARGET = 'target'
    CHAIN_START = 'chain_start'


# Start of the outermost Logger.io call in the current task, and the nesting depth
chain_start_var: ContextVar[float] = ContextVar('chain_start_var', default=0.0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)

# Loggers too chatty below INFO
_QUIET_LOGGERS = ('aiosqlite', 'asyncio', 'multipart')

LINE_FORMAT = (
    f'<c>{{extra[{LogExtra.SERVICE}]}}</> | <lvl>{{level:<8}}</> | '
    f'<c>{{name}}:{{function}}:{{line}}</> <y>{{extra[{LogExtra.TARGET}]}}</> | '
    f'{{message}} | <lk>{{elapsed}} {{extra[{LogExtra.CHAIN_START}]}}</>'
)


def access_log_level(message: str) -> str | None:
    """
    Level for a granian access line such as
    '127.0.0.1 - "POST /api/booking HTTP/1.1" - 409 - 3ms'; None for anything else
    """
    _, quote, rest = message.partition('" - ')
    if not quote or ' HTTP/' not in message:
        return None
    code = rest.split(' ', 1)[0]
    if not code.isdigit():
        return None

    status = int(code)
    if status >= 500:
        return 'CRITICAL'
    if status >= 400:
        return 'ERROR'
    if status >= 300:
        return 'WARNING'
    return 'SUCCESS'


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno < logging.INFO and record.name.startswith(_QUIET_LOGGERS):
            return

        message = record.getMessage()
        level: str | int | None = access_log_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        base_logger.opt(depth=depth, exception=record.exc_info).log(level, message)


def _log_file() -> Path:
    test_log_dir = os.environ.get('TEST_LOG_DIR')
    hour = datetime.now(timezone.utc).strftime('%Y-%m-%d_%H')
    if test_log_dir:
        return Path(test_log_dir) / f'test_{hour}.log'
    return Path(LOG_DIR) / f'{hour}.log'


loguru_logger.remove()
base_logger = loguru_logger.bind(
    **{LogExtra.SERVICE: get_service_context(), LogExtra.TARGET: '', LogExtra.CHAIN_START: ''}
)

MIN_LEVEL = 'DEBUG' if settings.DEBUG else 'INFO'

base_logger.add(sys.stdout, format=LINE_FORMAT, level=MIN_LEVEL, enqueue=True)

# Production ships stdout; the hourly file is a local debugging aid
if settings.DEBUG:
    base_logger.add(
        str(_log_file()),
        format=LINE_FORMAT,
        level=MIN_LEVEL,
        rotation='1 hour',
        retention='7 days',
        compression='gz',
        enqueue=True,
    )

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
