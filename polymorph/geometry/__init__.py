"""2D geometry value types and the numeric kernel."""

from polymorph.geometry.kernel import Kernel
from polymorph.geometry.primitives import Point2, Segment2, Vector2, distance, squared_distance

__all__ = [
    "Kernel",
    "Point2",
    "Segment2",
    "Vector2",
    "distance",
    "squared_distance",
]
