from functools import wraps
from inspect import iscoroutinefunction
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from bus_booking.platform.config.core_setting import settings
from bus_booking.platform.exception.exceptions import CustomBaseError
from bus_booking.platform.logging.loguru_io_config import LogExtra, base_logger
from bus_booking.platform.logging.loguru_io_utils import (
    describe_target,
    enter_call,
    exit_call,
    mask,
    shorten,
)


_F = TypeVar('_F', bound=Callable[..., Any])
_P = ParamSpec('_P')
_T = TypeVar('_T')

# helper -> wrapper -> decorated function's caller
_CALLER_DEPTH = 2


class LoguruIO:
    """
    Decorator logging the arguments, return value and failure of a call.

    Arguments and return values are logged at DEBUG (masked, optionally
    shortened). Business errors (CustomBaseError) are logged once at ERROR
    without traceback; anything else once with its traceback. The exception
    is re-raised unless reraise=False.
    """

    def __init__(self, *, reraise: bool = True, truncate_content: bool = False) -> None:
        self.reraise = reraise
        self.truncate_content = truncate_content

    def _render(self, data: Any) -> Any:
        data = mask(data)
        return shorten(data) if self.truncate_content else data

    def _log_call(self, log: 'LoguruLogger', args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        if settings.DEBUG:
            log.opt(depth=_CALLER_DEPTH).debug(
                f'args: {self._render(args)}, kwargs: {self._render(kwargs)}'
            )

    def _log_return(self, log: 'LoguruLogger', value: Any) -> None:
        if settings.DEBUG:
            log.opt(depth=_CALLER_DEPTH).debug(f'return: {self._render(value)}')

    def _log_error(self, log: 'LoguruLogger', e: Exception) -> None:
        # Nested decorated calls see the same exception; log it where it surfaced
        if getattr(e, '_logged_by_io', False):
            return
        e._logged_by_io = True  # type: ignore[attr-defined]

        message = f'{type(e).__name__}: {e}'
        if isinstance(e, CustomBaseError):
            log.opt(depth=_CALLER_DEPTH).error(message)
        else:
            log.opt(depth=_CALLER_DEPTH).exception(message)

    def __call__(self, func: _F) -> _F:
        target = describe_target(func)

        def bind() -> 'LoguruLogger':
            return base_logger.bind(**{LogExtra.TARGET: target, LogExtra.CHAIN_START: enter_call()})

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                log = bind()
                try:
                    self._log_call(log, args, kwargs)
                    value = await func(*args, **kwargs)
                except Exception as e:
                    self._log_error(log, e)
                    if self.reraise:
                        raise
                    return None
                finally:
                    exit_call()
                self._log_return(log, value)
                return value

            return cast(_F, async_wrapper)

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            log = bind()
            try:
                self._log_call(log, args, kwargs)
                value = func(*args, **kwargs)
            except Exception as e:
                self._log_error(log, e)
                if self.reraise:
                    raise
                return None
            finally:
                exit_call()
            self._log_return(log, value)
            return value

        return cast(_F, sync_wrapper)


class Logger:
    base = base_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None,
        *,
        reraise: bool = True,
        truncate_content: bool = False,
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(reraise=reraise, truncate_content=truncate_content)
        return decorator(func) if func else decorator
