# art_generator/geometry.py

"""
================================================================================
POINT TYPES
================================================================================
Plain immutable 2D and 3D points shared by the noise, turtle and automaton
modules. Nothing here holds state.
================================================================================
"""
import math
from typing import NamedTuple


class Point2D(NamedTuple):
    """A point (or vector) in the plane."""
    x: float
    y: float

    def distance(self, other: "Point2D") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def manhattan_distance(self, other: "Point2D") -> float:
        return abs(self.x - other.x) + abs(self.y - other.y)


class Point3D(NamedTuple):
    """A point (or vector) in space."""
    x: float
    y: float
    z: float

    def distance(self, other: "Point3D") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def manhattan_distance(self, other: "Point3D") -> float:
        return abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)


ORIGIN_2D = Point2D(0.0, 0.0)
ORIGIN_3D = Point3D(0.0, 0.0, 0.0)
