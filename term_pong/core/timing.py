"""
Default clock and seed sources
"""

import time


def monotonic_seconds() -> float:
    """High-resolution monotonic time in seconds"""
    return time.perf_counter()


def subsecond_micros() -> int:
    """Microseconds elapsed within the current second of the high-resolution clock"""
    return (time.perf_counter_ns() // 1_000) % 1_000_000
