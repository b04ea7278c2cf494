# art_generator/elementary_ca.py

"""
================================================================================
ELEMENTARY CELLULAR AUTOMATON
================================================================================
Wolfram's one-dimensional binary automata. Each cell's next value is looked up
from the 3-bit pattern (left << 2) | (center << 1) | right; bit k of the rule
number is the output for pattern k.

Data Contract:
---------------
- Inputs (on initialization):
    - rule (int): Clamped into [0, 255].
    - size (int) or state (array-like of bool): The initial row. A negative
      size gives an empty row.
- Outputs:
    - state: The current row as a NumPy bool array.
    - generate_history(n): A (n + 1, size) bool array, generation 0 first.
- Side Effects: step() and the setters mutate the row in place.
- Invariants: Cells beyond either end of the row are treated as dead. Each
  step is computed from a frozen copy of the previous row.
================================================================================
"""
from enum import Enum
from typing import Optional

import numpy as np

from . import config as DEFAULTS
from .random_source import RandomSource


class WellKnownRule(Enum):
    RULE_30 = 30
    RULE_54 = 54
    RULE_60 = 60
    RULE_90 = 90
    RULE_110 = 110
    RULE_124 = 124
    RULE_150 = 150
    RULE_184 = 184
    RULE_250 = 250

    @property
    def description(self) -> str:
        return _RULE_DESCRIPTIONS[self]


_RULE_DESCRIPTIONS = {
    WellKnownRule.RULE_30: "Rule 30 (Chaotic)",
    WellKnownRule.RULE_54: "Rule 54 (Sierpinski)",
    WellKnownRule.RULE_60: "Rule 60 (Pascal's Triangle)",
    WellKnownRule.RULE_90: "Rule 90 (Sierpinski XOR)",
    WellKnownRule.RULE_110: "Rule 110 (Turing Complete)",
    WellKnownRule.RULE_124: "Rule 124 (Growth)",
    WellKnownRule.RULE_150: "Rule 150 (Checkerboard)",
    WellKnownRule.RULE_184: "Rule 184 (Traffic Flow)",
    WellKnownRule.RULE_250: "Rule 250 (Symmetric)",
}


def build_rule_table(rule: int) -> np.ndarray:
    """The 8-entry lookup table for a rule number."""
    return np.array([(rule >> pattern) & 1 == 1 for pattern in range(8)], dtype=bool)


class ElementaryCA:
    """A 1D binary automaton with a fixed-size row."""

    def __init__(self, rule: int, size: Optional[int] = None, state=None):
        self.rule = min(max(int(rule), DEFAULTS.MIN_RULE), DEFAULTS.MAX_RULE)
        if state is not None:
            self._state = np.array(state, dtype=bool).ravel()
        else:
            self._state = np.zeros(max(0, size if size is not None else DEFAULTS.DEFAULT_CA_SIZE), dtype=bool)
        self.rule_table = build_rule_table(self.rule)
        self.rule_table.flags.writeable = False

    @classmethod
    def well_known(cls, rule: WellKnownRule, size: int) -> "ElementaryCA":
        return cls(rule.value, size=size)

    @property
    def size(self) -> int:
        return self._state.shape[0]

    @property
    def state(self) -> np.ndarray:
        """A copy of the current row."""
        return self._state.copy()

    def get_cell(self, index: int) -> bool:
        if 0 <= index < self.size:
            return bool(self._state[index])
        return False

    def set_cell(self, index: int, value: bool) -> None:
        """Sets one cell. Indices outside the row are ignored."""
        if 0 <= index < self.size:
            self._state[index] = value

    def step(self) -> None:
        """Advances one generation."""
        if self.size == 0:
            return
        row = self._state.astype(np.uint8)
        left = np.concatenate(([0], row[:-1]))
        right = np.concatenate((row[1:], [0]))
        patterns = (left << 2) | (row << 1) | right
        self._state = self.rule_table[patterns]

    def step_count(self, count: int) -> None:
        for _ in range(count):
            self.step()

    def set_single_center_cell(self) -> None:
        """Clears the row and sets only the middle cell."""
        self._state = np.zeros(self.size, dtype=bool)
        if self.size:
            self._state[self.size // 2] = True

    def randomize(self, probability: float = 0.5, seed: Optional[int] = None) -> None:
        """
        Sets each cell alive with the given probability. With seed=None the
        row is seeded from the wall clock and is not reproducible.
        """
        rng = RandomSource(seed) if seed is not None else RandomSource.from_entropy()
        self._state = np.array([rng.next_bool(probability) for _ in range(self.size)], dtype=bool)

    def generate_history(self, generations: int) -> np.ndarray:
        """
        Generation 0 (the current row) through generation N, one row each.
        The automaton itself is left untouched. A negative count is read as 0.
        """
        generations = max(0, int(generations))
        current = ElementaryCA(self.rule, state=self._state)
        history = np.zeros((generations + 1, self.size), dtype=bool)
        history[0] = current._state
        for generation in range(1, generations + 1):
            current.step()
            history[generation] = current._state
        return history
