import time
from typing import Optional


class Timer:
    """
    Monotonic stopwatch for a ``with`` block.

    Truncates to whole microseconds before converting
    to milliseconds.

    Example
    -------
    >>> with Timer() as timer:
    >>>     total = sum(range(1000))
    >>> timer.elapsed_ms >= 0.0
    True
    """

    def __init__(self):
        self.start_ns: Optional[int] = None
        self.end_ns: Optional[int] = None

    def __enter__(self) -> "Timer":
        self.end_ns = None
        self.start_ns = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.end_ns = time.perf_counter_ns()

    @property
    def elapsed_us(self) -> int:
        if self.start_ns is None or self.end_ns is None:
            raise RuntimeError('Timer has not finished a timed block')
        return (self.end_ns - self.start_ns) // 1000

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_us / 1000.0
