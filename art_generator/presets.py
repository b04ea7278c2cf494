# art_generator/presets.py

"""
================================================================================
PRESET TABLES
================================================================================
Named configurations: classic L-systems and Game of Life patterns. These are
plain constants; lookups return None for unknown names so the caller decides
how to report them.
================================================================================
"""
import math
from typing import Optional

from .life import Pattern
from .lsystem import LSystem

# --- L-Systems ---
LSYSTEM_PRESETS = {
    "koch_curve": LSystem("F", {"F": "F+F-F-F+F"}, math.pi / 2.0),
    "sierpinski_triangle": LSystem("F-G-G", {"F": "F-G+F+G-F", "G": "GG"}, 2.0 * math.pi / 3.0),
    "sierpinski_arrowhead": LSystem("A", {"A": "B-A-B", "B": "A+B+A"}, math.pi / 3.0),
    "dragon_curve": LSystem("F", {"F": "F+G", "G": "F-G"}, math.pi / 2.0),
    "fractal_plant": LSystem("X", {"X": "F+[[X]-X]-F[-FX]+X", "F": "FF"}, math.pi / 8.0),
    "barnsley_fern": LSystem("X", {"X": "F+[[X]-X]-F[-FX]+X", "F": "FF"}, math.radians(25.0)),
    "hilbert_curve": LSystem("A", {"A": "-BF+AFA+FB-", "B": "+AF-BFB-FA+"}, math.pi / 2.0),
    "peano_curve": LSystem("F", {"F": "F+F-F-F-F+F+F+F-F"}, math.pi / 2.0),
    "gosper_curve": LSystem("A", {"A": "A-B--B+A++AA+B-", "B": "+A-BB--B-A++A+B"}, math.pi / 3.0),
    "quadratic_koch_island": LSystem("F+F+F+F", {"F": "F+F-F-FF+F+F-F"}, math.pi / 2.0),
    "levy_curve": LSystem("F", {"F": "+F--F+"}, math.pi / 4.0),
    "crystal": LSystem("F+F+F+F", {"F": "FF+F++F+F"}, math.pi / 2.0),
    "binary_tree": LSystem("F", {"F": "F[+F]F[-F]F"}, math.pi / 6.0),
    "pentaplexity": LSystem("F++F++F++F++F", {"F": "F++F++F|F-F++F"}, math.pi / 5.0),
    "moore_curve": LSystem("LFL+F+LFL", {"L": "-RF+LFL+FR-", "R": "+LF-RFR-FL+"}, math.pi / 2.0),
    "hexagonal_gosper": LSystem("A", {"A": "A+B++B-A--AA-B+", "B": "-A+BB++B+A--A-B"}, math.pi / 3.0),
}


# --- Game of Life Patterns ---
def _pattern_from_coordinates(name: str, coordinates: list) -> Pattern:
    """Builds a pattern from (row, col) live-cell coordinates."""
    height = max(row for row, _ in coordinates) + 1
    width = max(col for _, col in coordinates) + 1
    rows = [['.'] * width for _ in range(height)]
    for row, col in coordinates:
        rows[row][col] = 'O'
    return Pattern.from_rows(name, [''.join(row) for row in rows])


GOSPER_GLIDER_GUN_CELLS = [
    (0, 24),
    (1, 22), (1, 24),
    (2, 12), (2, 13), (2, 20), (2, 21), (2, 34), (2, 35),
    (3, 11), (3, 15), (3, 20), (3, 21), (3, 34), (3, 35),
    (4, 0), (4, 1), (4, 10), (4, 16), (4, 20), (4, 21),
    (5, 0), (5, 1), (5, 10), (5, 14), (5, 16), (5, 17), (5, 22), (5, 24),
    (6, 10), (6, 16), (6, 24),
    (7, 11), (7, 15),
    (8, 12), (8, 13),
]

LIFE_PATTERNS = {
    # Spaceships
    "glider": Pattern.from_rows("glider", [".O.", "..O", "OOO"]),
    "lwss": Pattern.from_rows("lwss", [".O..O", "O....", "O...O", "OOOO."]),
    # Oscillators
    "blinker": Pattern.from_rows("blinker", ["OOO"]),
    "toad": Pattern.from_rows("toad", [".OOO", "OOO."]),
    "beacon": Pattern.from_rows("beacon", ["OO..", "OO..", "..OO", "..OO"]),
    # Still lifes
    "block": Pattern.from_rows("block", ["OO", "OO"]),
    "beehive": Pattern.from_rows("beehive", [".OO.", "O..O", ".OO."]),
    # Guns
    "gosper_glider_gun": _pattern_from_coordinates("gosper_glider_gun", GOSPER_GLIDER_GUN_CELLS),
}


def get_lsystem(name: str) -> Optional[LSystem]:
    return LSYSTEM_PRESETS.get(name)


def get_pattern(name: str) -> Optional[Pattern]:
    return LIFE_PATTERNS.get(name)
