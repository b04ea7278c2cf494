# art_generator/fractals.py

"""
================================================================================
FRACTAL SAMPLERS
================================================================================
Escape-time fractals (Mandelbrot and Julia sets) and the Sierpinski family
(chaos game, triangle subdivision, membership tests for the triangle and the
carpet).

The escape-time iteration is JIT-compiled in the same way as the noise
kernels: one scalar kernel plus flat-array field kernels built on it, so grid
and point sampling agree.

Data Contract:
---------------
- Inputs:
    - Complex coordinates as (real, imaginary) floats, or coordinate arrays
      for sample_grid().
    - max_iterations (int): Clamped to at least 1.
    - seed (int, optional): Seeds the chaos game's RandomSource.
- Outputs:
    - FractalSample(iterations, escaped, smooth_value) per point.
    - sample_grid(): smooth values divided by max_iterations, as a NumPy array.
    - chaos_game(): a list of Point2D inside the unit Sierpinski triangle.
- Side Effects: None. The chaos game owns a fresh RandomSource per call.
- Invariants: Samplers are immutable values. The same seed always plays the
  same chaos game.
================================================================================
"""
import math
from typing import NamedTuple, Optional

import numpy as np
from numba import njit

from . import config as DEFAULTS
from .geometry import Point2D
from .noise_generators import _flatten_coordinates
from .random_source import RandomSource

ESCAPE_RADIUS_SQUARED = DEFAULTS.ESCAPE_RADIUS_SQUARED


# --------------------------------------------------------------------------
# Kernels
# --------------------------------------------------------------------------

@njit
def escape_time(z_real, z_imag, c_real, c_imag, max_iterations):
    """
    Iterates z <- z^2 + c until |z|^2 exceeds the escape radius.
    Returns (iterations, escaped, smooth_value).
    """
    iteration = 0
    while iteration < max_iterations:
        real_squared = z_real * z_real
        imag_squared = z_imag * z_imag
        magnitude = real_squared + imag_squared
        if magnitude > ESCAPE_RADIUS_SQUARED:
            smooth = iteration + 1.0 - np.log2(np.log2(magnitude))
            return iteration, True, smooth
        z_imag = 2.0 * z_real * z_imag + c_imag
        z_real = real_squared - imag_squared + c_real
        iteration += 1
    return iteration, False, float(iteration)

@njit
def mandelbrot_field(real, imag, max_iterations):
    out = np.empty(real.shape[0])
    for i in range(real.shape[0]):
        _, _, smooth = escape_time(0.0, 0.0, real[i], imag[i], max_iterations)
        out[i] = smooth
    return out

@njit
def julia_field(real, imag, c_real, c_imag, max_iterations):
    out = np.empty(real.shape[0])
    for i in range(real.shape[0]):
        _, _, smooth = escape_time(real[i], imag[i], c_real, c_imag, max_iterations)
        out[i] = smooth
    return out


# --------------------------------------------------------------------------
# Escape-time samplers
# --------------------------------------------------------------------------

class FractalSample(NamedTuple):
    iterations: int
    escaped: bool
    # Fractional iteration count for banding-free colouring.
    smooth_value: float


class EscapeTimeFractal:
    """Shared sampling helpers. Subclasses provide _iterate and _field."""

    def __init__(self, max_iterations: int = DEFAULTS.DEFAULT_MAX_ITERATIONS):
        self.max_iterations = max(1, int(max_iterations))

    def sample(self, real: float, imag: float) -> FractalSample:
        iterations, escaped, smooth = self._iterate(float(real), float(imag))
        return FractalSample(int(iterations), bool(escaped), float(smooth))

    def sample_at(self, point: Point2D) -> FractalSample:
        """Samples at a point, reading x as the real part and y as the imaginary part."""
        return self.sample(point.x, point.y)

    def contains(self, real: float, imag: float) -> bool:
        """True when the orbit stays bounded for max_iterations steps."""
        return not self.sample(real, imag).escaped

    def normalized_iterations(self, real: float, imag: float) -> float:
        """Smooth value divided by max_iterations; 1.0 inside the set."""
        return self.sample(real, imag).smooth_value / self.max_iterations

    def sample_grid(self, real_coords, imag_coords) -> np.ndarray:
        """normalized_iterations over whole coordinate arrays."""
        real, imag, shape = _flatten_coordinates(real_coords, imag_coords)
        return (self._field(real, imag) / self.max_iterations).reshape(shape)


class Mandelbrot(EscapeTimeFractal):
    """The Mandelbrot set: z starts at 0 and c is the sampled point."""

    def _iterate(self, real, imag):
        return escape_time(0.0, 0.0, real, imag, self.max_iterations)

    def _field(self, real, imag):
        return mandelbrot_field(real, imag, self.max_iterations)

    def is_boundary(self, real: float, imag: float,
                    delta: float = DEFAULTS.DEFAULT_BOUNDARY_DELTA) -> bool:
        """True when any axis neighbour `delta` away disagrees on membership."""
        center = self.contains(real, imag)
        neighbours = ((real + delta, imag), (real - delta, imag),
                      (real, imag + delta), (real, imag - delta))
        return any(self.contains(r, i) != center for r, i in neighbours)


class JuliaSet(EscapeTimeFractal):
    """A Julia set: z starts at the sampled point and c is fixed."""

    def __init__(self, c_real: float, c_imaginary: float,
                 max_iterations: int = DEFAULTS.DEFAULT_MAX_ITERATIONS):
        super().__init__(max_iterations)
        self.c_real = float(c_real)
        self.c_imaginary = float(c_imaginary)

    @classmethod
    def preset(cls, name: str, max_iterations: int = DEFAULTS.DEFAULT_MAX_ITERATIONS) -> Optional["JuliaSet"]:
        """A named Julia set from JULIA_PRESETS, or None for an unknown name."""
        if name not in JULIA_PRESETS:
            return None
        c_real, c_imaginary = JULIA_PRESETS[name]
        return cls(c_real, c_imaginary, max_iterations)

    def _iterate(self, real, imag):
        return escape_time(real, imag, self.c_real, self.c_imaginary, self.max_iterations)

    def _field(self, real, imag):
        return julia_field(real, imag, self.c_real, self.c_imaginary, self.max_iterations)


# Values of c.
JULIA_PRESETS = {
    "classic": (-0.7, 0.27015),
    "dragon": (-0.8, 0.156),
    "dendrite": (0.0, 1.0),
    "spiral": (-0.4, 0.6),
    "douady_rabbit": (-0.123, 0.745),
    "san_marco": (-0.75, 0.0),
}


# --------------------------------------------------------------------------
# Sierpinski
# --------------------------------------------------------------------------

SIERPINSKI_VERTICES = (
    Point2D(0.0, 0.0),
    Point2D(1.0, 0.0),
    Point2D(0.5, math.sqrt(3.0) / 2.0),
)


def chaos_game(iterations: int = DEFAULTS.DEFAULT_CHAOS_GAME_ITERATIONS,
               seed: Optional[int] = None) -> list:
    """
    Plays the chaos game: start at a random point, then repeatedly jump
    halfway towards a randomly chosen triangle vertex. Returns every visited
    point after the start. With seed=None the game is seeded from the wall
    clock and is not reproducible.
    """
    rng = RandomSource(seed) if seed is not None else RandomSource.from_entropy()
    current = Point2D(rng.next_double(), rng.next_double())
    points = []
    for _ in range(max(0, iterations)):
        vertex = rng.next_element(SIERPINSKI_VERTICES)
        current = Point2D((current.x + vertex.x) / 2.0, (current.y + vertex.y) / 2.0)
        points.append(current)
    return points


class Triangle(NamedTuple):
    a: Point2D
    b: Point2D
    c: Point2D

    def subdivide(self) -> list:
        """The three corner triangles; the middle one is dropped."""
        ab = Point2D((self.a.x + self.b.x) / 2.0, (self.a.y + self.b.y) / 2.0)
        bc = Point2D((self.b.x + self.c.x) / 2.0, (self.b.y + self.c.y) / 2.0)
        ca = Point2D((self.c.x + self.a.x) / 2.0, (self.c.y + self.a.y) / 2.0)
        return [Triangle(self.a, ab, ca), Triangle(ab, self.b, bc), Triangle(ca, bc, self.c)]


def subdivision(depth: int) -> list:
    """The 3**depth triangles of a Sierpinski triangle after `depth` subdivisions."""
    triangles = [Triangle(*SIERPINSKI_VERTICES)]
    for _ in range(max(0, depth)):
        triangles = [child for triangle in triangles for child in triangle.subdivide()]
    return triangles


def triangle_contains(x: float, y: float, depth: int = DEFAULTS.DEFAULT_SIERPINSKI_DEPTH) -> bool:
    """
    Membership in the right-angled Sierpinski triangle on the unit square,
    by binary digits: a point is out once both coordinates carry a 1 in the
    same place.
    """
    for _ in range(depth):
        x *= 2.0
        y *= 2.0
        if x >= 1.0 and y >= 1.0:
            return False
        if x >= 1.0:
            x -= 1.0
        if y >= 1.0:
            y -= 1.0
    return True


def carpet_contains(x: int, y: int) -> bool:
    """Membership of integer cell (x, y) in the Sierpinski carpet (no base-3 digit pair is (1, 1))."""
    while x > 0 or y > 0:
        if x % 3 == 1 and y % 3 == 1:
            return False
        x //= 3
        y //= 3
    return True


def carpet_cells(depth: int, size: int = DEFAULTS.DEFAULT_CARPET_SIZE) -> list:
    """Filled carpet cells on a size**depth grid, as Point2D in [0, 1)."""
    grid_size = size ** max(0, depth)
    return [Point2D(x / grid_size, y / grid_size)
            for y in range(grid_size) for x in range(grid_size)
            if carpet_contains(x, y)]
