"""Error types raised by the morphing engine."""

from __future__ import annotations


class MorphingError(ValueError):
    """Base class for all engine errors."""


class InvalidInputError(MorphingError):
    """A point sequence is empty or contains something that is not a 2D point."""


class OutOfRangeError(MorphingError):
    """An abscissa lies outside ``[0, length]`` of the polyline."""

    def __init__(self, abscissa: float, length: float) -> None:
        self.abscissa = abscissa
        self.length = length
        super().__init__(f"Abscissa {abscissa!r} is outside the polyline extent [0, {length!r}]")
