# art_generator/__init__.py

# This file makes the 'art_generator' directory a Python package.
# It also defines the public API of the package.

__version__ = "0.1.0"

from .random_source import RandomSource
from .geometry import Point2D, Point3D
from .noise_generators import (
    NoiseGenerator, PerlinNoise, SimplexNoise, WorleyNoise, FractalNoise, DistanceMetric,
)
from .lsystem import LSystem, StochasticLSystem
from .turtle_graphics import Turtle, TurtleState, Line, bounding_box, normalize_lines
from .elementary_ca import ElementaryCA, WellKnownRule
from .fractals import FractalSample, Mandelbrot, JuliaSet, chaos_game
from .life import GameOfLife, Pattern
from .generator import ArtGenerator
from .log_setup import setup_logging

__all__ = [
    "RandomSource",
    "Point2D", "Point3D",
    "NoiseGenerator", "PerlinNoise", "SimplexNoise", "WorleyNoise", "FractalNoise", "DistanceMetric",
    "LSystem", "StochasticLSystem",
    "Turtle", "TurtleState", "Line", "bounding_box", "normalize_lines",
    "ElementaryCA", "WellKnownRule",
    "FractalSample", "Mandelbrot", "JuliaSet", "chaos_game",
    "GameOfLife", "Pattern",
    "ArtGenerator",
    "setup_logging",
]
