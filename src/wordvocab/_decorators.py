"""Timing decorator for vocabulary I/O."""

import functools
import logging
import time
from typing import Callable

log = logging.getLogger(__name__)


def timed(action: str, *, level: int = logging.DEBUG) -> Callable[[Callable], Callable]:
    """
    Log how long the wrapped callable takes.

    :param action: Short description used in the log message, e.g. "token file load".
    :param level: Log level for successful calls. Failures always log at WARNING.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed_ms = (time.perf_counter() - start) * 1000
                log.warning(
                    f"{action} failed after {elapsed_ms:.2f} ms: {type(e).__name__}"
                )
                raise
            elapsed_ms = (time.perf_counter() - start) * 1000
            log.log(level, f"{action} took {elapsed_ms:.2f} ms")
            return result

        return wrapper

    return decorator
