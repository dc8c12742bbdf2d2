"""Numeric kernel — selects the coordinate type used for point constructions.

INEXACT stores coordinates as float. EXACT stores them as Fraction, so
vector arithmetic between points is exact. Square roots cannot be exact,
so lengths are float under both kernels.
"""

from __future__ import annotations

import enum
from fractions import Fraction
from numbers import Integral, Real
from typing import Any

from polymorph.geometry.primitives import Point2


class Kernel(str, enum.Enum):
    INEXACT = "inexact"
    EXACT = "exact"

    def coerce(self, value: Any) -> float | Fraction:
        """Convert a real number to this kernel's coordinate type."""
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(f"Expected a real number, got {type(value).__name__}")
        if self is Kernel.EXACT:
            if isinstance(value, Fraction):
                return value
            if isinstance(value, Integral):
                return Fraction(int(value))
            # Fraction(float) is the exact binary value of the float
            return Fraction(float(value))
        return float(value)

    def point(self, x: Any, y: Any) -> Point2:
        return Point2(self.coerce(x), self.coerce(y))
