# art_generator/turtle_graphics.py

"""
================================================================================
TURTLE INTERPRETER
================================================================================
Turns an L-system string into line segments by walking a position/heading
cursor with a push/pop stack for branches.

Symbols:
    F, G   move forward one step and draw a line
    f, g   move forward one step without drawing
    +      turn right (heading -= angle_increment)
    -      turn left  (heading += angle_increment)
    [      push the current state
    ]      pop the last pushed state (ignored when the stack is empty)
    |      turn around (heading += pi)
Any other symbol is ignored.

Data Contract:
---------------
- Inputs: the instruction string, start position and start heading.
- Outputs: a list of Line segments in traversal order.
- Side Effects: None. The interpreter itself holds no state between calls.
================================================================================
"""
import math
from typing import NamedTuple, Optional

from . import config as DEFAULTS
from .geometry import ORIGIN_2D, Point2D

DRAW_SYMBOLS = frozenset('FG')
MOVE_SYMBOLS = frozenset('fg')


class TurtleState(NamedTuple):
    position: Point2D
    heading: float


class Line(NamedTuple):
    start: Point2D
    end: Point2D

    @property
    def length(self) -> float:
        return self.start.distance(self.end)

    @property
    def midpoint(self) -> Point2D:
        return Point2D((self.start.x + self.end.x) / 2.0, (self.start.y + self.end.y) / 2.0)


class Turtle:
    """A stateless turtle-graphics interpreter."""

    def __init__(self, step_length: float = DEFAULTS.DEFAULT_STEP_LENGTH,
                 angle_increment: float = DEFAULTS.DEFAULT_ANGLE_INCREMENT):
        self.step_length = step_length
        self.angle_increment = angle_increment

    @classmethod
    def from_lsystem(cls, lsystem, step_length: float = DEFAULTS.DEFAULT_STEP_LENGTH) -> "Turtle":
        """A turtle that turns by the L-system's own angle."""
        return cls(step_length=step_length, angle_increment=lsystem.angle)

    def _advance(self, state: TurtleState) -> Point2D:
        x, y = state.position
        return Point2D(x + self.step_length * math.cos(state.heading),
                       y + self.step_length * math.sin(state.heading))

    def interpret_with_state(self, instructions: str,
                             start_position: Point2D = ORIGIN_2D,
                             start_heading: float = DEFAULTS.DEFAULT_START_HEADING) -> tuple:
        """Interprets the string and returns (lines, final_state)."""
        lines = []
        state = TurtleState(Point2D(*start_position), start_heading)
        stack = []

        for symbol in instructions:
            if symbol in DRAW_SYMBOLS:
                new_position = self._advance(state)
                lines.append(Line(state.position, new_position))
                state = state._replace(position=new_position)
            elif symbol in MOVE_SYMBOLS:
                state = state._replace(position=self._advance(state))
            elif symbol == '+':
                state = state._replace(heading=state.heading - self.angle_increment)
            elif symbol == '-':
                state = state._replace(heading=state.heading + self.angle_increment)
            elif symbol == '[':
                stack.append(state)
            elif symbol == ']':
                # Unbalanced closing brackets are tolerated.
                if stack:
                    state = stack.pop()
            elif symbol == '|':
                state = state._replace(heading=state.heading + math.pi)

        return lines, state

    def interpret(self, instructions: str,
                  start_position: Point2D = ORIGIN_2D,
                  start_heading: float = DEFAULTS.DEFAULT_START_HEADING) -> list:
        """Interprets the string and returns the drawn line segments."""
        lines, _ = self.interpret_with_state(instructions, start_position, start_heading)
        return lines

    @staticmethod
    def bounding_box(lines: list) -> Optional[tuple]:
        return bounding_box(lines)

    @staticmethod
    def normalize(lines: list, bounds: tuple) -> list:
        return normalize_lines(lines, bounds)


def bounding_box(lines: list) -> Optional[tuple]:
    """(min_point, max_point) over every line endpoint, or None for no lines."""
    if not lines:
        return None
    xs = [coord for line in lines for coord in (line.start.x, line.end.x)]
    ys = [coord for line in lines for coord in (line.start.y, line.end.y)]
    return Point2D(min(xs), min(ys)), Point2D(max(xs), max(ys))


def normalize_lines(lines: list, bounds: tuple) -> list:
    """
    Uniformly scales and translates lines so they fit inside `bounds`
    ((min_point, max_point)), anchored at the bounds' minimum corner. Lines
    with a zero-width or zero-height extent are returned unchanged.
    """
    bbox = bounding_box(lines)
    if bbox is None:
        return lines

    (min_x, min_y), (max_x, max_y) = bbox
    (target_min_x, target_min_y), (target_max_x, target_max_y) = bounds
    width = max_x - min_x
    height = max_y - min_y
    if width <= 0 or height <= 0:
        return lines

    scale = min((target_max_x - target_min_x) / width, (target_max_y - target_min_y) / height)

    def transform(point: Point2D) -> Point2D:
        return Point2D(target_min_x + (point.x - min_x) * scale,
                       target_min_y + (point.y - min_y) * scale)

    return [Line(transform(line.start), transform(line.end)) for line in lines]
