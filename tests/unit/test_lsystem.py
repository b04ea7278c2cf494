"""Unit tests for deterministic and stochastic L-systems."""

import math

import pytest

from art_generator.lsystem import LSystem, StochasticLSystem


@pytest.fixture
def algae():
    """Lindenmayer's algae system; lengths follow the Fibonacci numbers."""
    return LSystem("A", {"A": "AB", "B": "A"})


class TestLSystem:
    """Parallel string rewriting."""

    @pytest.mark.unit
    def test_fibonacci_lengths(self, algae):
        lengths = [len(s) for s in algae.iterate_with_history(5)]
        assert lengths == [1, 2, 3, 5, 8, 13]

    @pytest.mark.unit
    def test_known_generations(self, algae):
        assert algae.iterate(0) == "A"
        assert algae.iterate(1) == "AB"
        assert algae.iterate(4) == "ABAABABA"

    @pytest.mark.unit
    def test_symbols_without_rules_are_kept(self):
        system = LSystem("F+F", {"F": "FF"})
        assert system.iterate(1) == "FF+FF"

    @pytest.mark.unit
    def test_empty_rules_is_identity(self):
        system = LSystem("F-G[+F]")
        assert system.iterate(10) == "F-G[+F]"

    @pytest.mark.unit
    def test_rewriting_is_parallel(self):
        """Replacements produced in a generation are not rewritten again in that generation."""
        system = LSystem("A", {"A": "B", "B": "C"})
        assert system.iterate(1) == "B"
        assert system.iterate(2) == "C"

    @pytest.mark.unit
    def test_history_ends_with_iterate(self, algae):
        history = algae.iterate_with_history(6)
        assert len(history) == 7
        assert history[0] == algae.axiom
        assert history[-1] == algae.iterate(6)

    @pytest.mark.unit
    def test_rules_are_immutable(self):
        source = {"F": "FF"}
        system = LSystem("F", source)
        source["F"] = "G"
        assert system.iterate(1) == "FF"
        with pytest.raises(TypeError):
            system.rules["F"] = "G"

    @pytest.mark.unit
    def test_builder(self):
        system = (LSystem.builder()
                  .axiom("F")
                  .rule("F", "F+F")
                  .rule("F", "F-F")
                  .angle(math.pi / 3.0)
                  .build())
        assert system.axiom == "F"
        # The last rule for a symbol wins.
        assert system.rules["F"] == "F-F"
        assert system.angle == pytest.approx(math.pi / 3.0)

    @pytest.mark.unit
    def test_builder_calls_do_not_share_state(self):
        base = LSystem.builder().axiom("X")
        one = base.rule("X", "Y").build()
        two = base.rule("X", "Z").build()
        assert one.iterate(1) == "Y"
        assert two.iterate(1) == "Z"


class TestStochasticLSystem:
    """Weighted random choice between productions."""

    RULES = {"F": [("F[+F]F", 1.0), ("F[-F]F", 1.0), ("FF", 2.0)]}

    @pytest.mark.unit
    def test_same_seed_same_output(self):
        a = StochasticLSystem("F", self.RULES, seed=77)
        b = StochasticLSystem("F", self.RULES, seed=77)
        assert a.iterate(4) == b.iterate(4)

    @pytest.mark.unit
    def test_different_seeds_diverge(self):
        outputs = {StochasticLSystem("F", self.RULES, seed=seed).iterate(4) for seed in range(10)}
        assert len(outputs) > 1

    @pytest.mark.unit
    def test_single_candidate_is_deterministic(self):
        system = StochasticLSystem("A", {"A": ["AB"], "B": ["A"]}, seed=5)
        assert system.iterate(4) == "ABAABABA"

    @pytest.mark.unit
    def test_output_only_uses_candidate_symbols(self):
        system = StochasticLSystem("F", self.RULES, seed=3)
        assert set(system.iterate(3)) <= set("F[]+-")

    @pytest.mark.unit
    def test_zero_weight_candidate_is_never_chosen(self):
        system = StochasticLSystem("AAAAAAAAAA", {"A": [("B", 1.0), ("C", 0.0)]}, seed=1)
        assert system.iterate(1) == "B" * 10

    @pytest.mark.unit
    def test_to_lsystem_uses_first_candidate(self):
        system = StochasticLSystem("F", self.RULES, angle=0.5, seed=0).to_lsystem()
        assert isinstance(system, LSystem)
        assert system.iterate(1) == "F[+F]F"
        assert system.angle == 0.5


class TestRuleKeys:
    """Rules are keyed by single characters."""

    @pytest.mark.unit
    def test_multi_character_keys_are_dropped(self):
        system = LSystem("AB", {"AB": "X", "A": "C", "": "Y"})
        assert dict(system.rules) == {"A": "C"}
        assert system.iterate(1) == "CB"

    @pytest.mark.unit
    def test_stochastic_multi_character_keys_are_dropped(self):
        system = StochasticLSystem("AB", {"AB": ["X"], "B": ["D"]}, seed=1)
        assert set(system.rules) == {"B"}
        assert system.iterate(1) == "AD"
