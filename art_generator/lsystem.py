# art_generator/lsystem.py

"""
================================================================================
L-SYSTEM ENGINE
================================================================================
String rewriting for Lindenmayer systems. Every generation replaces each
symbol with its production, or keeps it when no rule exists.

Data Contract:
---------------
- Inputs:
    - axiom (str), rules ({symbol: replacement}), angle (radians).
- Outputs:
    - Generated strings, or the whole list of generations.
- Side Effects: None for LSystem. StochasticLSystem advances its own
  RandomSource on every choice.
- Invariants: LSystem is an immutable value and generation is a pure fold.
  String length can grow exponentially with the generation count; callers
  bound the number of generations.
================================================================================
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .random_source import RandomSource


@dataclass(frozen=True)
class LSystem:
    """
    A deterministic L-system: axiom, single-valued rules and a turn angle.
    Rules are keyed by single characters; keys of any other length can never
    match a symbol and are dropped.
    """
    axiom: str
    rules: Mapping[str, str] = field(default_factory=dict)
    angle: float = 0.0

    def __post_init__(self):
        rules = {symbol: replacement for symbol, replacement in dict(self.rules).items() if len(symbol) == 1}
        object.__setattr__(self, 'rules', MappingProxyType(rules))

    def generate(self, current: str) -> str:
        """Rewrites one generation."""
        rules = self.rules
        return ''.join(rules.get(symbol, symbol) for symbol in current)

    def iterate(self, generations: int) -> str:
        """Applies `generations` rewrites to the axiom."""
        current = self.axiom
        for _ in range(generations):
            current = self.generate(current)
        return current

    def iterate_with_history(self, generations: int) -> list:
        """Generation 0 (the axiom) through generation N inclusive."""
        history = [self.axiom]
        current = self.axiom
        for _ in range(generations):
            current = self.generate(current)
            history.append(current)
        return history

    @staticmethod
    def builder() -> "LSystemBuilder":
        return LSystemBuilder()


@dataclass(frozen=True)
class LSystemBuilder:
    """Fluent construction. Each call returns a new builder."""
    _axiom: str = ''
    _rules: tuple = ()
    _angle: float = 0.0

    def axiom(self, value: str) -> "LSystemBuilder":
        return LSystemBuilder(value, self._rules, self._angle)

    def rule(self, symbol: str, produces: str) -> "LSystemBuilder":
        return LSystemBuilder(self._axiom, self._rules + ((symbol, produces),), self._angle)

    def angle(self, value: float) -> "LSystemBuilder":
        return LSystemBuilder(self._axiom, self._rules, value)

    def build(self) -> LSystem:
        # Later rules for the same symbol win.
        return LSystem(self._axiom, dict(self._rules), self._angle)


class StochasticLSystem:
    """
    An L-system whose symbols may have several candidate productions. One
    candidate is drawn per occurrence per generation from an owned
    RandomSource, so the same seed always grows the same string.

    Candidates are either plain strings (equally likely) or
    (replacement, weight) pairs. As with LSystem, only single-character
    keys are kept.
    """

    def __init__(self, axiom: str, rules: dict, angle: float = 0.0, seed: int = 0):
        self.axiom = axiom
        self.angle = angle
        self.rules = {symbol: self._normalize_candidates(options)
                      for symbol, options in rules.items() if len(symbol) == 1}
        self._rng = RandomSource(seed)

    @classmethod
    def from_entropy(cls, axiom: str, rules: dict, angle: float = 0.0) -> "StochasticLSystem":
        """A wall-clock seeded system. Not reproducible."""
        return cls(axiom, rules, angle, seed=RandomSource.from_entropy().next_u64())

    @staticmethod
    def _normalize_candidates(options) -> list:
        candidates = []
        for option in options:
            if isinstance(option, str):
                candidates.append((option, 1.0))
            else:
                replacement, weight = option
                candidates.append((replacement, float(weight)))
        return candidates

    def _choose(self, candidates: list) -> str:
        total = sum(weight for _, weight in candidates)
        if total <= 0:
            return candidates[self._rng.next_int(len(candidates))][0]
        target = self._rng.next_double() * total
        for replacement, weight in candidates:
            target -= weight
            if target < 0:
                return replacement
        return candidates[-1][0]

    def generate(self, current: str) -> str:
        result = []
        for symbol in current:
            candidates = self.rules.get(symbol)
            if candidates:
                result.append(self._choose(candidates))
            else:
                result.append(symbol)
        return ''.join(result)

    def iterate(self, generations: int) -> str:
        current = self.axiom
        for _ in range(generations):
            current = self.generate(current)
        return current

    def to_lsystem(self) -> LSystem:
        """A deterministic LSystem using each symbol's first candidate."""
        rules = {symbol: (candidates[0][0] if candidates else '')
                 for symbol, candidates in self.rules.items()}
        return LSystem(self.axiom, rules, self.angle)
