from inspect import getsourcelines
from pathlib import Path
import re
from time import perf_counter
from typing import Any, Callable

from bus_booking.platform.logging.loguru_io_config import call_depth_var, chain_start_var


MAX_CONTENT_LENGTH = 500
MASK = '********'

# Keys whose values never reach a log line
SENSITIVE_KEYS = frozenset(
    {'password', 'plain_password', 'hashed_password', 'token', 'signature', 'secret_key'}
)

# `password='x'`, `"token": "y"`, `hashed_password=abc` inside reprs
_SENSITIVE_PATTERN = re.compile(
    r'(\b(?:' + '|'.join(sorted(SENSITIVE_KEYS)) + r')\b[\'"]?\s*[=:]\s*)'
    r'(\'[^\']*\'|"[^"]*"|[^,)\s}]+)'
)


def describe_target(func: Callable[..., Any]) -> str:
    """`module_file.py::Class.method:line` of a decorated callable"""
    target = getattr(func, '__func__', func)
    code = getattr(target, '__code__', None)
    filename = Path(code.co_filename).name if code else '?'
    try:
        line = getsourcelines(target)[1]
    except (OSError, TypeError):
        line = 0
    return f'{filename}::{func.__qualname__}:{line}'


def enter_call() -> str:
    """Track nesting; returns the chain's elapsed time so far in ms"""
    depth = call_depth_var.get()
    if depth == 0:
        chain_start_var.set(perf_counter())
    call_depth_var.set(depth + 1)
    return f'+{(perf_counter() - chain_start_var.get()) * 1000:.1f}ms'


def exit_call() -> None:
    depth = max(call_depth_var.get() - 1, 0)
    call_depth_var.set(depth)
    if depth == 0:
        chain_start_var.set(0.0)


def mask(data: Any) -> Any:
    """Mask sensitive values in mappings, sequences and reprs"""
    if isinstance(data, dict):
        return {k: MASK if k in SENSITIVE_KEYS else mask(v) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return type(data)(mask(item) for item in data)

    text = str(data)
    masked = _SENSITIVE_PATTERN.sub(rf"\1'{MASK}'", text)
    return data if masked == text else masked


def shorten(data: Any) -> Any:
    text = data if isinstance(data, str) else repr(data)
    if len(text) <= MAX_CONTENT_LENGTH:
        return data
    return f'{text[:MAX_CONTENT_LENGTH]}...(+{len(text) - MAX_CONTENT_LENGTH})'
