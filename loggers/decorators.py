# -*- coding: utf-8 -*-
"""
Logging Decorators and Context Managers
=======================================

``log_execution`` traces a function's entry, exit and timing on the
stdlib ``topsis`` logger; ``log_context`` and ``timed_operation`` scope
annotations and timing to a ``with`` block.
"""

from __future__ import annotations

import time
import logging
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, Optional

from .context import LogContext


def log_execution(
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
) -> Callable:
    """Decorator that logs function entry, exit, and timing."""

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or logging.getLogger('topsis')
            func_name = func.__qualname__

            log.log(level, f'Calling {func_name}')
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                elapsed = time.perf_counter() - start
                log.error(f'{func_name} failed after {elapsed:.3f}s: {exc}')
                raise
            elapsed = time.perf_counter() - start
            log.log(level, f'{func_name} completed ({elapsed:.3f}s)')
            return result

        return wrapper
    return decorator


@contextmanager
def log_context(**kwargs: Any) -> Generator[None, None, None]:
    """Temporarily inject key/value pairs into the thread-local log context."""
    for key, value in kwargs.items():
        LogContext.set(key, value)
    try:
        yield
    finally:
        for key in kwargs:
            LogContext.remove(key)


@contextmanager
def timed_operation(
    logger: logging.Logger,
    operation: str,
    level: int = logging.INFO,
) -> Generator[None, None, None]:
    """Context manager that logs start / finish with elapsed time."""
    start = time.perf_counter()
    logger.log(level, f'Starting: {operation}')
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        logger.log(level, f'Finished: {operation} ({elapsed:.3f}s)')


__all__ = [
    'log_execution',
    'log_context',
    'timed_operation',
]
