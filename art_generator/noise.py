# art_generator/noise.py

"""
================================================================================
NOISE GENERATION KERNELS
================================================================================
This module provides the JIT-compiled kernels behind the noise generators:
classic Perlin, Simplex and Worley (cellular) noise in 2D and 3D. It is
designed to be a pure, stateless utility; the classes in noise_generators.py
own the tables and pick the kernel.

Data Contract:
---------------
- Inputs:
    - p: A doubled (512-entry) NumPy permutation table (int64 array).
    - seed: A np.uint64 seed (Worley only).
    - x, y, z: Scalar coordinates, or flat float64 arrays for the *_field
      kernels.
- Outputs:
    - Perlin / Simplex: values approximately in [-1, 1].
    - Worley: the distance to the nearest feature point (>= 0).
- Side Effects: None.
- Invariants: Every kernel is a pure function of its arguments. The *_field
  kernels return an array with the same length as the input coordinates and
  compute each entry with the scalar kernel, so grid and point sampling agree.
================================================================================
"""

import numpy as np
from numba import njit

# --- Simplex constants ---
F2 = 0.5 * (np.sqrt(3.0) - 1.0)
G2 = (3.0 - np.sqrt(3.0)) / 6.0
F3 = 1.0 / 3.0
G3 = 1.0 / 6.0
SIMPLEX_SCALE_2D = 70.0
SIMPLEX_SCALE_3D = 32.0

# The 12 edge directions of the unit cube, shared by both simplex kernels.
_SIMPLEX_GRADIENTS = np.array([
    [1, 1, 0], [-1, 1, 0], [1, -1, 0], [-1, -1, 0],
    [1, 0, 1], [-1, 0, 1], [1, 0, -1], [-1, 0, -1],
    [0, 1, 1], [0, -1, 1], [0, 1, -1], [0, -1, -1],
], dtype=np.float64)

# --- Worley constants ---
METRIC_EUCLIDEAN = 0
METRIC_MANHATTAN = 1
METRIC_CHEBYSHEV = 2
METRIC_MINKOWSKI = 3

NEIGHBOURHOOD_2D = 9

_HASH_X = np.uint64(0x9E3779B97F4A7C15)
_HASH_Y = np.uint64(0xBF58476D1CE4E5B9)
_HASH_Z = np.uint64(0x94D049BB133111EB)
_HASH_FINAL_2D = np.uint64(0x94D049BB133111EB)
_HASH_FINAL_3D = np.uint64(0x6C62272E07BB0142)

# SplitMix64, identical to RandomSource.next_u64.
_GOLDEN_GAMMA = np.uint64(0x9E3779B97F4A7C15)
_MIX_1 = np.uint64(0xBF58476D1CE4E5B9)
_MIX_2 = np.uint64(0x94D049BB133111EB)
_DOUBLE_UNIT = 1.0 / 9007199254740992.0


@njit
def _lerp(a, b, x):
    "Linear interpolation."
    return a + x * (b - a)

@njit
def _fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)

@njit
def _grad2(h, x, y):
    """Dot product with one of the four diagonal gradients (+-1, +-1)."""
    h = h & 3
    u = x if h < 2 else y
    v = y if h < 2 else x
    return (u if (h & 1) == 0 else -u) + (v if (h & 2) == 0 else -v)

@njit
def _grad3(h, x, y, z):
    """Dot product with one of Perlin's twelve cube-edge gradients."""
    h = h & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h == 12 or h == 14:
        v = x
    else:
        v = z
    return (u if (h & 1) == 0 else -u) + (v if (h & 2) == 0 else -v)


# --------------------------------------------------------------------------
# Perlin
# --------------------------------------------------------------------------

@njit
def perlin_2d(p, x, y):
    """Classic 2D Perlin noise at a single point."""
    x_floor = np.floor(x)
    y_floor = np.floor(y)
    xi = int(x_floor) & 255
    yi = int(y_floor) & 255

    xf = x - x_floor
    yf = y - y_floor

    u = _fade(xf)
    v = _fade(yf)

    a = p[xi] + yi
    b = p[xi + 1] + yi

    aa = p[a]
    ab = p[a + 1]
    ba = p[b]
    bb = p[b + 1]

    x1 = _lerp(_grad2(p[aa], xf, yf), _grad2(p[ba], xf - 1, yf), u)
    x2 = _lerp(_grad2(p[ab], xf, yf - 1), _grad2(p[bb], xf - 1, yf - 1), u)
    return _lerp(x1, x2, v)

@njit
def perlin_3d(p, x, y, z):
    """Classic 3D Perlin noise at a single point."""
    x_floor = np.floor(x)
    y_floor = np.floor(y)
    z_floor = np.floor(z)
    xi = int(x_floor) & 255
    yi = int(y_floor) & 255
    zi = int(z_floor) & 255

    xf = x - x_floor
    yf = y - y_floor
    zf = z - z_floor

    u = _fade(xf)
    v = _fade(yf)
    w = _fade(zf)

    a = p[xi] + yi
    aa = p[a] + zi
    ab = p[a + 1] + zi
    b = p[xi + 1] + yi
    ba = p[b] + zi
    bb = p[b + 1] + zi

    x1 = _lerp(_grad3(p[aa], xf, yf, zf), _grad3(p[ba], xf - 1, yf, zf), u)
    x2 = _lerp(_grad3(p[ab], xf, yf - 1, zf), _grad3(p[bb], xf - 1, yf - 1, zf), u)
    y1 = _lerp(x1, x2, v)

    x3 = _lerp(_grad3(p[aa + 1], xf, yf, zf - 1), _grad3(p[ba + 1], xf - 1, yf, zf - 1), u)
    x4 = _lerp(_grad3(p[ab + 1], xf, yf - 1, zf - 1), _grad3(p[bb + 1], xf - 1, yf - 1, zf - 1), u)
    y2 = _lerp(x3, x4, v)

    return _lerp(y1, y2, w)


# --------------------------------------------------------------------------
# Simplex
# --------------------------------------------------------------------------

@njit
def _corner_2d(x, y, gi):
    t = 0.5 - x * x - y * y
    if t < 0:
        return 0.0
    t *= t
    return t * t * (_SIMPLEX_GRADIENTS[gi, 0] * x + _SIMPLEX_GRADIENTS[gi, 1] * y)

@njit
def _corner_3d(x, y, z, gi):
    t = 0.6 - x * x - y * y - z * z
    if t < 0:
        return 0.0
    t *= t
    g = _SIMPLEX_GRADIENTS[gi]
    return t * t * (g[0] * x + g[1] * y + g[2] * z)

@njit
def simplex_2d(p, x, y):
    """2D simplex noise at a single point."""
    # Skew the input space to find the simplex cell.
    s = (x + y) * F2
    i = np.floor(x + s)
    j = np.floor(y + s)

    t = (i + j) * G2
    x0 = x - (i - t)
    y0 = y - (j - t)

    # Lower or upper triangle of the skewed unit square.
    if x0 > y0:
        i1, j1 = 1, 0
    else:
        i1, j1 = 0, 1

    x1 = x0 - i1 + G2
    y1 = y0 - j1 + G2
    x2 = x0 - 1.0 + 2.0 * G2
    y2 = y0 - 1.0 + 2.0 * G2

    ii = int(i) & 255
    jj = int(j) & 255

    gi0 = p[ii + p[jj]] % 12
    gi1 = p[ii + i1 + p[jj + j1]] % 12
    gi2 = p[ii + 1 + p[jj + 1]] % 12

    n0 = _corner_2d(x0, y0, gi0)
    n1 = _corner_2d(x1, y1, gi1)
    n2 = _corner_2d(x2, y2, gi2)

    return SIMPLEX_SCALE_2D * (n0 + n1 + n2)

@njit
def simplex_3d(p, x, y, z):
    """3D simplex noise at a single point."""
    s = (x + y + z) * F3
    i = np.floor(x + s)
    j = np.floor(y + s)
    k = np.floor(z + s)

    t = (i + j + k) * G3
    x0 = x - (i - t)
    y0 = y - (j - t)
    z0 = z - (k - t)

    # Pick the tetrahedron from the ordering of the offsets.
    if x0 >= y0:
        if y0 >= z0:
            i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 1, 0
        elif x0 >= z0:
            i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 0, 1
        else:
            i1, j1, k1, i2, j2, k2 = 0, 0, 1, 1, 0, 1
    else:
        if y0 < z0:
            i1, j1, k1, i2, j2, k2 = 0, 0, 1, 0, 1, 1
        elif x0 < z0:
            i1, j1, k1, i2, j2, k2 = 0, 1, 0, 0, 1, 1
        else:
            i1, j1, k1, i2, j2, k2 = 0, 1, 0, 1, 1, 0

    x1 = x0 - i1 + G3
    y1 = y0 - j1 + G3
    z1 = z0 - k1 + G3
    x2 = x0 - i2 + 2.0 * G3
    y2 = y0 - j2 + 2.0 * G3
    z2 = z0 - k2 + 2.0 * G3
    x3 = x0 - 1.0 + 3.0 * G3
    y3 = y0 - 1.0 + 3.0 * G3
    z3 = z0 - 1.0 + 3.0 * G3

    ii = int(i) & 255
    jj = int(j) & 255
    kk = int(k) & 255

    gi0 = p[ii + p[jj + p[kk]]] % 12
    gi1 = p[ii + i1 + p[jj + j1 + p[kk + k1]]] % 12
    gi2 = p[ii + i2 + p[jj + j2 + p[kk + k2]]] % 12
    gi3 = p[ii + 1 + p[jj + 1 + p[kk + 1]]] % 12

    n0 = _corner_3d(x0, y0, z0, gi0)
    n1 = _corner_3d(x1, y1, z1, gi1)
    n2 = _corner_3d(x2, y2, z2, gi2)
    n3 = _corner_3d(x3, y3, z3, gi3)

    return SIMPLEX_SCALE_3D * (n0 + n1 + n2 + n3)


# --------------------------------------------------------------------------
# Worley
# --------------------------------------------------------------------------

@njit
def _splitmix_next(state):
    """One SplitMix64 step. Returns (new_state, output)."""
    state = state + _GOLDEN_GAMMA
    z = state
    z = (z ^ (z >> np.uint64(30))) * _MIX_1
    z = (z ^ (z >> np.uint64(27))) * _MIX_2
    return state, z ^ (z >> np.uint64(31))

@njit
def _unit(z):
    return np.float64(z >> np.uint64(11)) * _DOUBLE_UNIT

@njit
def _hash_cell_2d(cx, cy, seed):
    h = seed
    h ^= np.uint64(cx) * _HASH_X
    h ^= np.uint64(cy) * _HASH_Y
    h ^= h >> np.uint64(27)
    return h * _HASH_FINAL_2D

@njit
def _hash_cell_3d(cx, cy, cz, seed):
    h = seed
    h ^= np.uint64(cx) * _HASH_X
    h ^= np.uint64(cy) * _HASH_Y
    h ^= np.uint64(cz) * _HASH_Z
    h ^= h >> np.uint64(27)
    return h * _HASH_FINAL_3D

@njit
def feature_point_2d(cx, cy, seed):
    """The feature point of integer cell (cx, cy), as an offset in [0, 1)^2."""
    state = _hash_cell_2d(cx, cy, seed)
    state, z = _splitmix_next(state)
    fx = _unit(z)
    state, z = _splitmix_next(state)
    fy = _unit(z)
    return fx, fy

@njit
def feature_point_3d(cx, cy, cz, seed):
    state = _hash_cell_3d(cx, cy, cz, seed)
    state, z = _splitmix_next(state)
    fx = _unit(z)
    state, z = _splitmix_next(state)
    fy = _unit(z)
    state, z = _splitmix_next(state)
    fz = _unit(z)
    return fx, fy, fz

@njit
def _distance_2d(dx, dy, metric, exponent):
    dx = abs(dx)
    dy = abs(dy)
    if metric == METRIC_EUCLIDEAN:
        return np.sqrt(dx * dx + dy * dy)
    elif metric == METRIC_MANHATTAN:
        return dx + dy
    elif metric == METRIC_CHEBYSHEV:
        return max(dx, dy)
    return (dx ** exponent + dy ** exponent) ** (1.0 / exponent)

@njit
def _distance_3d(dx, dy, dz, metric, exponent):
    dx = abs(dx)
    dy = abs(dy)
    dz = abs(dz)
    if metric == METRIC_EUCLIDEAN:
        return np.sqrt(dx * dx + dy * dy + dz * dz)
    elif metric == METRIC_MANHATTAN:
        return dx + dy + dz
    elif metric == METRIC_CHEBYSHEV:
        return max(dx, max(dy, dz))
    return (dx ** exponent + dy ** exponent + dz ** exponent) ** (1.0 / exponent)

@njit
def _neighbour_distances_2d(seed, x, y, metric, exponent):
    cell_x = int(np.floor(x))
    cell_y = int(np.floor(y))
    distances = np.empty(NEIGHBOURHOOD_2D)
    n = 0
    for offset_y in range(-1, 2):
        for offset_x in range(-1, 2):
            nx = cell_x + offset_x
            ny = cell_y + offset_y
            fx, fy = feature_point_2d(nx, ny, seed)
            distances[n] = _distance_2d(x - (nx + fx), y - (ny + fy), metric, exponent)
            n += 1
    return distances

@njit
def worley_2d(seed, x, y, metric, exponent):
    """Distance from (x, y) to the nearest feature point."""
    return _neighbour_distances_2d(seed, x, y, metric, exponent).min()

@njit
def worley_distances_2d(seed, x, y, metric, exponent, count):
    """The `count` smallest feature-point distances, ascending."""
    distances = np.sort(_neighbour_distances_2d(seed, x, y, metric, exponent))
    count = min(max(count, 0), NEIGHBOURHOOD_2D)
    return distances[:count].copy()

@njit
def worley_3d(seed, x, y, z, metric, exponent):
    cell_x = int(np.floor(x))
    cell_y = int(np.floor(y))
    cell_z = int(np.floor(z))
    best = np.inf
    for offset_z in range(-1, 2):
        for offset_y in range(-1, 2):
            for offset_x in range(-1, 2):
                nx = cell_x + offset_x
                ny = cell_y + offset_y
                nz = cell_z + offset_z
                fx, fy, fz = feature_point_3d(nx, ny, nz, seed)
                d = _distance_3d(x - (nx + fx), y - (ny + fy), z - (nz + fz), metric, exponent)
                if d < best:
                    best = d
    return best


# --------------------------------------------------------------------------
# Field kernels (flat coordinate arrays in, flat values out)
# --------------------------------------------------------------------------

@njit
def perlin_field_2d(p, x, y):
    out = np.empty(x.shape[0])
    for i in range(x.shape[0]):
        out[i] = perlin_2d(p, x[i], y[i])
    return out

@njit
def simplex_field_2d(p, x, y):
    out = np.empty(x.shape[0])
    for i in range(x.shape[0]):
        out[i] = simplex_2d(p, x[i], y[i])
    return out

@njit
def worley_field_2d(seed, x, y, metric, exponent):
    out = np.empty(x.shape[0])
    for i in range(x.shape[0]):
        out[i] = worley_2d(seed, x[i], y[i], metric, exponent)
    return out
