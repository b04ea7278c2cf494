# art_generator/life.py

"""
================================================================================
CONWAY'S GAME OF LIFE
================================================================================
A bounded (non-toroidal) Life grid. Live cells survive with 2 or 3 live Moore
neighbours; dead cells are born with exactly 3. Cells outside the grid are
always dead.

Data Contract:
---------------
- Inputs (on initialization):
    - width, height (int), or an existing boolean grid (rows of cells).
- Outputs:
    - grid: A (height, width) NumPy bool array, indexed grid[y, x].
    - population_count, living_cells: Pure scans of the grid.
- Side Effects: step(), set_cell(), randomize(), clear() and place_pattern()
  mutate the grid in place.
- Invariants: A step reads only the previous generation. Writes outside the
  grid are ignored.
================================================================================
"""
from typing import NamedTuple, Optional

import numpy as np
from scipy.ndimage import convolve

from .random_source import RandomSource

# Moore neighbourhood, centre excluded.
NEIGHBOR_KERNEL = np.array([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=np.int16)


class Pattern(NamedTuple):
    """A named boolean stamp, rows top to bottom."""
    name: str
    cells: tuple

    @classmethod
    def from_rows(cls, name: str, rows: list) -> "Pattern":
        """Builds a pattern from strings such as '.O.' ('O' alive, anything else dead)."""
        return cls(name, tuple(tuple(ch == 'O' for ch in row) for row in rows))

    @property
    def width(self) -> int:
        return max((len(row) for row in self.cells), default=0)

    @property
    def height(self) -> int:
        return len(self.cells)


class GameOfLife:
    """Conway's Game of Life on a fixed-size grid."""

    def __init__(self, width: int, height: int):
        self.width = max(0, width)
        self.height = max(0, height)
        self._grid = np.zeros((self.height, self.width), dtype=bool)

    @classmethod
    def from_grid(cls, grid) -> "GameOfLife":
        cells = np.atleast_2d(np.array(grid, dtype=bool))
        if cells.size == 0:
            cells = np.zeros((0, 0), dtype=bool)
        life = cls(cells.shape[1], cells.shape[0])
        life._grid = cells.copy()
        return life

    @property
    def grid(self) -> np.ndarray:
        """A copy of the current generation."""
        return self._grid.copy()

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_alive(self, x: int, y: int) -> bool:
        if self._in_bounds(x, y):
            return bool(self._grid[y, x])
        return False

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Sets one cell. Coordinates outside the grid are ignored."""
        if self._in_bounds(x, y):
            self._grid[y, x] = alive

    def neighbor_counts(self) -> np.ndarray:
        """Live Moore-neighbour count of every cell; off-grid cells count as dead."""
        return convolve(self._grid.astype(np.int16), NEIGHBOR_KERNEL, mode='constant', cval=0)

    def step(self) -> None:
        """Advances one generation."""
        if self._grid.size == 0:
            return
        neighbors = self.neighbor_counts()
        born = ~self._grid & (neighbors == 3)
        survives = self._grid & ((neighbors == 2) | (neighbors == 3))
        self._grid = born | survives

    def step_count(self, count: int) -> None:
        for _ in range(count):
            self.step()

    def randomize(self, probability: float = 0.5, seed: Optional[int] = None) -> None:
        """
        Independent Bernoulli draw per cell in row-major order. With seed=None
        the grid is seeded from the wall clock and is not reproducible.
        """
        rng = RandomSource(seed) if seed is not None else RandomSource.from_entropy()
        cells = [rng.next_bool(probability) for _ in range(self.width * self.height)]
        self._grid = np.array(cells, dtype=bool).reshape(self.height, self.width)

    def clear(self) -> None:
        self._grid = np.zeros((self.height, self.width), dtype=bool)

    def place_pattern(self, pattern: Pattern, x: int, y: int) -> None:
        """
        Copies the pattern with its top-left corner at (x, y). Both live and
        dead cells are written; cells falling outside the grid are clipped.
        """
        for dy, row in enumerate(pattern.cells):
            for dx, cell in enumerate(row):
                self.set_cell(x + dx, y + dy, cell)

    @property
    def population_count(self) -> int:
        return int(np.count_nonzero(self._grid))

    @property
    def living_cells(self) -> list:
        """(x, y) of every live cell, in row-major order."""
        ys, xs = np.nonzero(self._grid)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]
