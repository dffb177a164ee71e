#!/usr/bin/env python3

"""Logger lookup and the expansion timing decorator."""

import logging
from collections.abc import Callable
from functools import wraps
from time import perf_counter
from typing import Any, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str) -> logging.Logger:
    """Get the logger for a module (pass ``__name__``)."""
    return logging.getLogger(name)


def _call_label(func: Callable[..., Any], args: tuple[Any, ...]) -> str:
    # Methods of an expander are grouped under its template prefix
    prefix = getattr(args[0], "template_prefix", None) if args else None
    if prefix:
        return f"[{prefix}] {func.__qualname__}"
    return func.__qualname__


def log_timing(func: F) -> F:
    """
    Decorator logging how long an expansion call takes.

    Successful calls are logged at DEBUG in milliseconds; a failing call is
    logged at ERROR with the exception message and re-raised unchanged, so a
    declaration that aborts still leaves a trace.

    Args:
        func: Function or method to decorate

    Returns:
        Wrapped function
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        label = _call_label(func, args)
        started = perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"{label} failed after {(perf_counter() - started) * 1000:.2f}ms: {e}")
            raise

        logger.debug(f"{label} completed in {(perf_counter() - started) * 1000:.2f}ms")
        return result

    return cast("F", wrapper)
