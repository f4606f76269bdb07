"""
Utility decorators and context managers.
"""

import time
from contextlib import contextmanager


class Timer:
    """Elapsed wall-clock time, filled in when the timed block exits."""

    def __init__(self):
        self.start = 0.0
        self.elapsed_ms = 0

    def __repr__(self) -> str:
        return f"Timer(elapsed_ms={self.elapsed_ms})"


@contextmanager
def timer():
    """
    Time a block of code.

    Example:
        >>> with timer() as t:
        ...     do_work()
        >>> t.elapsed_ms
    """
    t = Timer()
    t.start = time.perf_counter()
    try:
        yield t
    finally:
        t.elapsed_ms = int((time.perf_counter() - t.start) * 1000)
