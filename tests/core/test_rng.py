"""
Unit tests for the XorShift generator

The raw sequence for seed 42 is a regression fixture: launch directions
depend on it, so any change to the recurrence is a behaviour change.
"""

import pytest

from term_pong.core.rng import XorShift

SEED_42_SEQUENCE = [
    45454805674,
    11532217803599905471,
    10021416941527320954,
    2899061411254629736,
    5661411637479084162,
]


class TestXorShiftNext:
    """Test the raw 64-bit stream"""

    def test_seed_42_regression(self):
        """Seed 42 always produces the same first values"""
        rng = XorShift(42)
        assert [rng.next() for _ in range(5)] == SEED_42_SEQUENCE

    def test_seed_1_first_value(self):
        """Small seeds follow the shift recurrence exactly"""
        rng = XorShift(1)
        assert rng.next() == 1082269761

    def test_values_stay_64_bit(self):
        """State never grows past 64 bits"""
        rng = XorShift(0xFFFFFFFFFFFFFFFF)
        for _ in range(1000):
            value = rng.next()
            assert 0 <= value < 2**64

    def test_zero_seed_is_stuck(self):
        """Zero is a fixed point of the recurrence"""
        rng = XorShift(0)
        assert [rng.next() for _ in range(3)] == [0, 0, 0]

    def test_same_seed_same_stream(self):
        """Two generators with the same seed agree"""
        a = XorShift(123456789)
        b = XorShift(123456789)
        assert [a.next() for _ in range(20)] == [b.next() for _ in range(20)]


class TestXorShiftRange:
    """Test the float mapping"""

    def test_large_values_collapse_to_min(self):
        """Single-precision remainder of a large value by 2 is always zero"""
        rng = XorShift(42)
        assert rng.range(-1.0, 1.0) == -1.0
        assert rng.range(-1.0, 1.0) == -1.0

    def test_remainder_uses_single_precision(self):
        """45454805674 rounds to 45454807040 in float32, which is 2 mod 3"""
        rng = XorShift(42)
        assert rng.range(0.0, 3.0) == 2.0

    def test_zero_seed_returns_min(self):
        """A zero stream maps to the lower bound"""
        rng = XorShift(0)
        assert rng.range(-1.0, 1.0) == -1.0

    @pytest.mark.parametrize("seed", [1, 42, 99, 2**40 + 17])
    def test_result_within_bounds(self, seed):
        """Values land in [min, max)"""
        rng = XorShift(seed)
        for _ in range(200):
            value = rng.range(-1.0, 1.0)
            assert -1.0 <= value < 1.0
