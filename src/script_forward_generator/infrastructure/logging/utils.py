#!/usr/bin/env python3

"""Logging helpers shared by the parser, emitter and CLI."""

import logging
from collections.abc import Callable
from functools import wraps
from time import perf_counter
from typing import Any, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_timing(func: F) -> F:
    """
    Decorator that logs how long a generation step took.

    Failures are logged with the elapsed time and re-raised unchanged.

    Args:
        func: Function to decorate

    Returns:
        Wrapped function
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        step = func.__qualname__

        logger.debug(f"Starting {step}")
        started = perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.debug(f"{step} failed after {(perf_counter() - started) * 1000:.1f}ms: {e}")
            raise

        logger.debug(f"Completed {step} in {(perf_counter() - started) * 1000:.1f}ms")
        return result

    return cast("F", wrapper)
