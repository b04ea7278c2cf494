# art_generator/random_source.py

"""
================================================================================
DETERMINISTIC RANDOM SOURCE
================================================================================
A small seedable pseudo-random generator (SplitMix64) used by every stochastic
component: permutation tables, stochastic L-systems and automaton seeding.

Data Contract:
---------------
- Inputs (on initialization):
    - seed (int): Any integer. It is reduced to 64 bits.
- Outputs (from methods):
    - Uniform floats in [0, 1), integers in [0, n), booleans, shuffles and
      random picks.
- Side Effects: Every draw advances the internal 64-bit state.
- Invariants: Two sources built from the same seed and driven by the same
  call sequence produce identical outputs. An instance has a single owner;
  there is no locking.
================================================================================
"""
import time

MASK_64 = 0xFFFFFFFFFFFFFFFF

# SplitMix64 constants. The Worley kernels in noise.py use the same stream.
GOLDEN_GAMMA = 0x9E3779B97F4A7C15
MIX_MULTIPLIER_1 = 0xBF58476D1CE4E5B9
MIX_MULTIPLIER_2 = 0x94D049BB133111EB

# 53 bits of mantissa -> a double in [0, 1).
_DOUBLE_UNIT = 1.0 / (1 << 53)


class RandomSource:
    """Seedable SplitMix64 generator."""

    def __init__(self, seed: int):
        self._state = seed & MASK_64

    @classmethod
    def from_entropy(cls) -> "RandomSource":
        """
        Creates a source seeded from the wall clock. The output is NOT
        reproducible; use the seeded constructor wherever determinism matters.
        """
        return cls(time.time_ns())

    @property
    def state(self) -> int:
        return self._state

    def next_u64(self) -> int:
        """Advances the state and returns the next raw 64-bit value."""
        self._state = (self._state + GOLDEN_GAMMA) & MASK_64
        z = self._state
        z = ((z ^ (z >> 30)) * MIX_MULTIPLIER_1) & MASK_64
        z = ((z ^ (z >> 27)) * MIX_MULTIPLIER_2) & MASK_64
        return z ^ (z >> 31)

    def next_double(self) -> float:
        """Uniform float in [0, 1)."""
        return (self.next_u64() >> 11) * _DOUBLE_UNIT

    def next_double_in(self, low: float, high: float) -> float:
        """Uniform float in [low, high)."""
        return low + self.next_double() * (high - low)

    def next_int(self, upper_bound: int) -> int:
        """Uniform integer in [0, upper_bound). A bound below 1 yields 0."""
        if upper_bound <= 0:
            return 0
        return min(int(self.next_double() * upper_bound), upper_bound - 1)

    def next_bool(self, probability: float = 0.5) -> bool:
        """True with the given probability."""
        return self.next_double() < probability

    def shuffle(self, items: list) -> None:
        """Fisher-Yates shuffle, in place."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_int(i + 1)
            items[i], items[j] = items[j], items[i]

    def next_element(self, items):
        """Returns a random element, or None if the sequence is empty."""
        if len(items) == 0:
            return None
        return items[self.next_int(len(items))]
