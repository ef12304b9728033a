"""
Deterministic XorShift generator used to pick ball launch directions
"""

import numpy as np

_MASK_64 = 0xFFFFFFFFFFFFFFFF


class XorShift:
    """64-bit XorShift generator (not cryptographically secure)"""

    def __init__(self, seed: int):
        self.state = seed & _MASK_64

    def next(self) -> int:
        """Advances the generator and returns the new 64-bit value"""
        x = self.state
        x ^= (x << 13) & _MASK_64
        x ^= x >> 7
        x ^= (x << 17) & _MASK_64
        self.state = x
        return x

    def range(self, min_value: float, max_value: float) -> float:
        """
        Maps the next raw value into [min_value, max_value)

        The raw value is cast to single precision and reduced with a float
        remainder. The result is heavily biased (large raw values are exact
        multiples of the span) but reproducible for a given seed.
        """
        span = np.float32(max_value) - np.float32(min_value)
        raw = np.uint64(self.next()).astype(np.float32)
        return float(np.float32(min_value) + np.fmod(raw, span))
