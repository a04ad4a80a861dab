"""
Logging setup and latency tracking for outbound calls.
"""
import inspect
import logging
import time
from functools import wraps
from typing import Callable, Union


def setup_logging(level: Union[int, str] = logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def log_latency(operation_name: str):
    """Log how long the wrapped coroutine took and whether it raised."""
    def decorator(func: Callable):
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"log_latency only wraps async functions, got {func.__qualname__}")

        logger = logging.getLogger(func.__module__)

        @wraps(func)
        async def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
                latency_ms = (time.perf_counter() - start) * 1000
                logger.debug(f"{operation_name} | latency_ms={latency_ms:.2f} | status=success")
                return result
            except Exception as e:
                latency_ms = (time.perf_counter() - start) * 1000
                logger.warning(f"{operation_name} | latency_ms={latency_ms:.2f} | status=error | error={e}")
                raise

        return wrapper

    return decorator
