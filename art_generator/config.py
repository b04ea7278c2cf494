# art_generator/config.py

"""
================================================================================
INTERNAL DEFAULT CONFIGURATION
================================================================================
This module contains the default, fallback internal constants for the art
generator. These values are used if they are not explicitly provided by the
user's configuration.

DO NOT MODIFY THIS FILE FOR A SPECIFIC PIECE.
Instead, pass a configuration dictionary to the ArtGenerator instance.
================================================================================
"""
import math

# --- Seeding ---
DEFAULT_SEED = 1337
# Offsets added to the master seed so each layer gets its own deterministic
# stream without the caller having to manage several seeds.
NOISE_SEED_OFFSET = 0
AUTOMATON_SEED_OFFSET = 104729

# --- Noise Generation ---
# One of 'perlin', 'simplex', 'worley'.
DEFAULT_NOISE_TYPE = 'perlin'
NOISE_TYPES = ('perlin', 'simplex', 'worley')

# Fractal (octave) layering. An octave count of 1 is plain noise.
DEFAULT_OCTAVES = 4
DEFAULT_PERSISTENCE = 0.5
DEFAULT_LACUNARITY = 2.0
DEFAULT_NOISE_SCALE = 1.0

# Worley distance metric, and the exponent used by the Minkowski metric.
DEFAULT_WORLEY_METRIC = 'euclidean'
DEFAULT_MINKOWSKI_P = 3.0
DEFAULT_WORLEY_DISTANCE_COUNT = 2

# Perlin and Simplex are only approximately bounded to [-1, 1].
NOISE_BOUND_TOLERANCE = 1.05

# --- Permutation Table ---
PERMUTATION_SIZE = 256

# --- L-Systems & Turtle ---
DEFAULT_LSYSTEM_PRESET = 'koch_curve'
DEFAULT_LSYSTEM_GENERATIONS = 3
DEFAULT_STEP_LENGTH = 1.0
DEFAULT_ANGLE_INCREMENT = math.pi / 2.0
# The turtle starts pointing "up" (+y).
DEFAULT_START_HEADING = math.pi / 2.0

# --- Escape-Time Fractals ---
# One of 'mandelbrot', 'julia'.
DEFAULT_FRACTAL_TYPE = 'mandelbrot'
FRACTAL_TYPES = ('mandelbrot', 'julia')
DEFAULT_MAX_ITERATIONS = 100
# |z|^2 beyond this means the orbit escapes.
ESCAPE_RADIUS_SQUARED = 4.0
DEFAULT_JULIA_PRESET = 'classic'
# Edge-detection offset for Mandelbrot.is_boundary.
DEFAULT_BOUNDARY_DELTA = 0.001

# --- Sierpinski ---
DEFAULT_CHAOS_GAME_ITERATIONS = 10000
DEFAULT_SIERPINSKI_DEPTH = 8
DEFAULT_CARPET_SIZE = 3

# --- Cellular Automata ---
DEFAULT_CA_RULE = 30
DEFAULT_CA_SIZE = 64
DEFAULT_CA_GENERATIONS = 32
MIN_RULE = 0
MAX_RULE = 255

DEFAULT_LIFE_WIDTH = 64
DEFAULT_LIFE_HEIGHT = 48
DEFAULT_LIFE_PROBABILITY = 0.5
DEFAULT_LIFE_STEPS = 10

# --- Logging ---
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
