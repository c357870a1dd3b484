import time
from datetime import timedelta
from typing import Callable, Tuple, TypeVar

R = TypeVar("R")


def profile(f: Callable[[], R]) -> Tuple[R, timedelta]:
    """Call f once and return (result, elapsed wall-clock time)

    timedelta only resolves microseconds, so very fast calls may report 0.
    """
    start = time.perf_counter()
    result = f()
    elapsed = time.perf_counter() - start
    return result, timedelta(seconds=elapsed)


def format_duration(duration: timedelta) -> str:
    seconds = duration.total_seconds()
    if seconds < 0:
        raise ValueError("duration must be non-negative")
    if seconds < 1e-3:
        return f"{seconds * 1e6:.0f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"
