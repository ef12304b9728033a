"""
Time source protocols - isolate wall-clock reads from game logic
"""

from typing import Protocol


class ClockProtocol(Protocol):
    """
    Monotonic clock returning seconds as a float.

    The ball integrates its position over the difference between two reads,
    so only the differences matter.
    """

    def __call__(self) -> float: ...


class SeedSourceProtocol(Protocol):
    """
    Seed provider for the launch-direction generator.

    The default implementation reads the clock, which makes launches
    irreproducible; tests inject a constant seed instead.
    """

    def __call__(self) -> int: ...
