"""Leaf-node geometry value types. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Vector2:
    """Displacement between two points."""

    x: Real
    y: Real

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: Real) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def squared_length(self) -> Real:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.hypot(float(self.x), float(self.y))


@dataclass(frozen=True)
class Point2:
    """A point in the plane. Coordinates are float or Fraction depending on the kernel."""

    x: Real
    y: Real

    def __add__(self, other: Vector2) -> Point2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Point2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2 | Vector2) -> Vector2 | Point2:
        if isinstance(other, Point2):
            return Vector2(self.x - other.x, self.y - other.y)
        if isinstance(other, Vector2):
            return Point2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def as_tuple(self) -> tuple[float, float]:
        return (float(self.x), float(self.y))


@dataclass(frozen=True)
class Segment2:
    """Directed segment from ``source`` to ``target``."""

    source: Point2
    target: Point2

    def to_vector(self) -> Vector2:
        return self.target - self.source

    def squared_length(self) -> Real:
        return self.to_vector().squared_length()

    def length(self) -> float:
        return self.to_vector().length()


def squared_distance(a: Point2, b: Point2) -> Real:
    return (b - a).squared_length()


def distance(a: Point2, b: Point2) -> float:
    """Euclidean distance. Always float, even for exact coordinates."""
    return (b - a).length()
