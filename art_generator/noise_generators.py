# art_generator/noise_generators.py

"""
================================================================================
NOISE GENERATORS
================================================================================
Object wrappers around the kernels in noise.py. Each generator owns its
immutable tables (permutation table or seed) and exposes the same sampling
interface, so renderers and the fractal layer can treat them interchangeably.

Data Contract:
---------------
- Inputs (on initialization):
    - seed (int, optional): Seeds the permutation table (Perlin, Simplex) or
      the feature-point hash (Worley).
- Outputs (from methods):
    - sample(x, y) / sample(x, y, z): A float noise value.
    - sample_grid(x_coords, y_coords): A NumPy array with the broadcast shape
      of the inputs.
- Side Effects: None.
- Invariants: Output is a pure function of the coordinates and the tables
  built at construction. Generators are safe to share read-only.
================================================================================
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

import numpy as np

from . import config as DEFAULTS
from . import noise
from .random_source import MASK_64, RandomSource

# Ken Perlin's reference permutation, used when no seed is given.
DEFAULT_PERMUTATION = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)


def build_permutation_table(seed: Optional[int] = None) -> np.ndarray:
    """
    Builds the doubled 512-entry permutation table. With a seed the identity
    sequence is shuffled by a RandomSource; without one the reference table
    is used. The returned array is read-only.
    """
    if seed is None:
        p = np.array(DEFAULT_PERMUTATION, dtype=np.int64)
    else:
        values = list(range(DEFAULTS.PERMUTATION_SIZE))
        RandomSource(seed).shuffle(values)
        p = np.array(values, dtype=np.int64)
    table = np.concatenate([p, p])
    table.flags.writeable = False
    return table


def _flatten_coordinates(x_coords, y_coords):
    """Broadcasts two coordinate arrays and returns them flat, with the shape."""
    x, y = np.broadcast_arrays(np.asarray(x_coords, dtype=np.float64),
                               np.asarray(y_coords, dtype=np.float64))
    return np.ascontiguousarray(x.ravel()), np.ascontiguousarray(y.ravel()), x.shape


class NoiseGenerator(ABC):
    """
    Anything that can be sampled as a scalar field over 2D or 3D coordinates.
    Subclasses implement sample(); the helpers below come for free.
    """

    @abstractmethod
    def sample(self, x: float, y: float, z: Optional[float] = None) -> float:
        """Samples the field at (x, y) or, when z is given, at (x, y, z)."""

    def sample_at(self, point) -> float:
        """Samples at a Point2D or Point3D."""
        return self.sample(*point)

    def normalized(self, x: float, y: float, z: Optional[float] = None) -> float:
        """Maps the typical [-1, 1] output to [0, 1]."""
        return (self.sample(x, y, z) + 1.0) * 0.5

    def mapped(self, x: float, y: float, z: Optional[float] = None, *,
               low: float = 0.0, high: float = 1.0) -> float:
        """Maps the normalized value onto [low, high]."""
        return low + self.normalized(x, y, z) * (high - low)

    def sample_grid(self, x_coords, y_coords) -> np.ndarray:
        """
        Samples a whole 2D field at once. The default implementation loops
        over sample(); kernel-backed generators override _sample_flat.
        """
        x, y, shape = _flatten_coordinates(x_coords, y_coords)
        return self._sample_flat(x, y).reshape(shape)

    def _sample_flat(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        return np.array([self.sample(xi, yi) for xi, yi in zip(x, y)], dtype=np.float64)


class PerlinNoise(NoiseGenerator):
    """Classic gradient noise. Output is approximately in [-1, 1]."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._p = build_permutation_table(seed)

    @property
    def permutation_table(self) -> np.ndarray:
        return self._p

    def sample(self, x, y, z=None):
        if z is None:
            return float(noise.perlin_2d(self._p, float(x), float(y)))
        return float(noise.perlin_3d(self._p, float(x), float(y), float(z)))

    def _sample_flat(self, x, y):
        return noise.perlin_field_2d(self._p, x, y)


class SimplexNoise(NoiseGenerator):
    """Simplex noise over skewed triangles (2D) or tetrahedra (3D)."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._p = build_permutation_table(seed)

    @property
    def permutation_table(self) -> np.ndarray:
        return self._p

    def sample(self, x, y, z=None):
        if z is None:
            return float(noise.simplex_2d(self._p, float(x), float(y)))
        return float(noise.simplex_3d(self._p, float(x), float(y), float(z)))

    def _sample_flat(self, x, y):
        return noise.simplex_field_2d(self._p, x, y)


class DistanceMetric(Enum):
    """Distance functions for Worley noise. Values are the kernel codes."""
    EUCLIDEAN = noise.METRIC_EUCLIDEAN
    MANHATTAN = noise.METRIC_MANHATTAN
    CHEBYSHEV = noise.METRIC_CHEBYSHEV
    MINKOWSKI = noise.METRIC_MINKOWSKI

    @classmethod
    def from_name(cls, name: str) -> "DistanceMetric":
        return cls[name.upper()]


class WorleyNoise(NoiseGenerator):
    """
    Cellular noise: the distance from a point to the nearest pseudo-random
    feature point, one feature point per integer cell. Output is >= 0 and,
    unlike Perlin/Simplex, not centred on zero.
    """

    def __init__(self, seed: int = DEFAULTS.DEFAULT_SEED,
                 metric: DistanceMetric = DistanceMetric.EUCLIDEAN,
                 exponent: float = DEFAULTS.DEFAULT_MINKOWSKI_P):
        self.seed = seed & MASK_64
        self.metric = metric
        # Only read by the Minkowski metric.
        self.exponent = float(exponent)
        self._kernel_seed = np.uint64(self.seed)

    @classmethod
    def from_entropy(cls, metric: DistanceMetric = DistanceMetric.EUCLIDEAN,
                     exponent: float = DEFAULTS.DEFAULT_MINKOWSKI_P) -> "WorleyNoise":
        """A generator with a wall-clock seed. Not reproducible."""
        return cls(seed=RandomSource.from_entropy().next_u64(), metric=metric, exponent=exponent)

    def sample(self, x, y, z=None):
        if z is None:
            return float(noise.worley_2d(self._kernel_seed, float(x), float(y),
                                         self.metric.value, self.exponent))
        return float(noise.worley_3d(self._kernel_seed, float(x), float(y), float(z),
                                     self.metric.value, self.exponent))

    def sample_distances(self, x: float, y: float,
                         count: int = DEFAULTS.DEFAULT_WORLEY_DISTANCE_COUNT) -> list:
        """The `count` nearest feature-point distances, ascending (F1, F2, ...)."""
        distances = noise.worley_distances_2d(self._kernel_seed, float(x), float(y),
                                              self.metric.value, self.exponent, int(count))
        return [float(d) for d in distances]

    def feature_point(self, cell_x: int, cell_y: int) -> tuple:
        """World-space position of the feature point owned by an integer cell."""
        fx, fy = noise.feature_point_2d(int(cell_x), int(cell_y), self._kernel_seed)
        return cell_x + float(fx), cell_y + float(fy)

    def _sample_flat(self, x, y):
        return noise.worley_field_2d(self._kernel_seed, x, y, self.metric.value, self.exponent)


class FractalNoise(NoiseGenerator):
    """
    Layers several octaves of a base generator. Each octave multiplies the
    frequency by `lacunarity` and the amplitude by `persistence`; the sum is
    divided by the total amplitude so the result stays within the base
    generator's range whatever the octave count.
    """

    def __init__(self, base_noise: Optional[NoiseGenerator] = None,
                 octaves: int = DEFAULTS.DEFAULT_OCTAVES,
                 persistence: float = DEFAULTS.DEFAULT_PERSISTENCE,
                 lacunarity: float = DEFAULTS.DEFAULT_LACUNARITY,
                 scale: float = DEFAULTS.DEFAULT_NOISE_SCALE,
                 seed: Optional[int] = None):
        self.base_noise = base_noise if base_noise is not None else PerlinNoise(seed)
        self.octaves = max(1, int(octaves))
        self.persistence = persistence
        self.lacunarity = lacunarity
        self.scale = scale

    def _layer(self, signal_at, shape):
        total = 0.0
        max_value = 0.0
        amplitude = 1.0
        frequency = self.scale
        for _ in range(self.octaves):
            total = total + shape(signal_at(frequency)) * amplitude
            max_value += amplitude
            amplitude *= self.persistence
            frequency *= self.lacunarity
        return total / max_value

    def _point_signal(self, x, y, z):
        if z is None:
            return lambda f: self.base_noise.sample(x * f, y * f)
        return lambda f: self.base_noise.sample(x * f, y * f, z * f)

    def sample(self, x, y, z=None):
        return float(self._layer(self._point_signal(x, y, z), lambda s: s))

    def turbulence(self, x: float, y: float, z: Optional[float] = None) -> float:
        """Octave sum of |signal|: billowy, always >= 0."""
        return float(self._layer(self._point_signal(x, y, z), abs))

    def ridged(self, x: float, y: float, z: Optional[float] = None) -> float:
        """Octave sum of 1 - |signal|: sharp ridges along the base noise's zero lines."""
        return float(self._layer(self._point_signal(x, y, z), lambda s: 1.0 - abs(s)))

    def sample_grid(self, x_coords, y_coords):
        x = np.asarray(x_coords, dtype=np.float64)
        y = np.asarray(y_coords, dtype=np.float64)
        return self._layer(lambda f: self.base_noise.sample_grid(x * f, y * f), lambda s: s)
