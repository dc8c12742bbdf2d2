"""Arc-length indexed polyline.

Wraps an ordered point sequence and precomputes the cumulative abscissa of
every vertex so that "which point lies at distance d from the start" is a
binary search plus one linear interpolation.

    >>> line = LengthIndexedPolyline([(0, 0), (1, 0), (1, 1)])
    >>> line.length()
    2.0
    >>> line.interpolate(1.5)
    Point2(x=1.0, y=0.5)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import NDArray

from polymorph.engine.config import MorphConfig
from polymorph.errors import InvalidInputError, OutOfRangeError
from polymorph.geometry.kernel import Kernel
from polymorph.geometry.primitives import Point2, Segment2
from polymorph.utils.geometry import arc_lengths, exact_arc_lengths, points_to_array
from polymorph.utils.math_helpers import clamp

logger = logging.getLogger(__name__)


def _to_point(item: Any, kernel: Kernel, index: int) -> Point2:
    if isinstance(item, Point2):
        x, y = item.x, item.y
    else:
        try:
            x, y = item
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Point #{index} is not an (x, y) pair: {item!r}") from e
    try:
        point = kernel.point(x, y)
    except TypeError as e:
        raise InvalidInputError(f"Point #{index} has non-numeric coordinates: {item!r}") from e
    except (ValueError, OverflowError) as e:
        raise InvalidInputError(f"Point #{index} has non-finite coordinates: {item!r}") from e
    if not all(math.isfinite(c) for c in point.as_tuple()):
        raise InvalidInputError(f"Point #{index} has non-finite coordinates: {item!r}")
    return point


class LengthIndexedPolyline:
    """Polyline with cumulative arc-length at each vertex.

    ``abscissas[0] == 0`` and ``abscissas[i] == abscissas[i-1] + |p[i-1] p[i]|``.
    The sequence is non-decreasing; it repeats a value wherever two
    consecutive points coincide.
    """

    def __init__(
        self,
        points: Iterable[Any],
        kernel: Kernel | None = None,
        config: MorphConfig | None = None,
    ) -> None:
        self.config = config or MorphConfig()
        self.kernel = Kernel(kernel) if kernel is not None else self.config.kernel

        self._points: tuple[Point2, ...] = tuple(
            _to_point(item, self.kernel, i) for i, item in enumerate(points)
        )
        if not self._points:
            raise InvalidInputError("A polyline needs at least one point")

        if self.kernel is Kernel.EXACT:
            abscissas = exact_arc_lengths(self._points)
        else:
            abscissas = arc_lengths(points_to_array(self._points))
        abscissas.setflags(write=False)
        self._abscissas: NDArray[np.float64] = abscissas

        logger.debug(
            "Polyline: %d points, length %.6g (%s kernel)",
            len(self._points),
            self.length(),
            self.kernel.value,
        )

    def __len__(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return f"LengthIndexedPolyline({len(self)} points, length={self.length():.6g})"

    @property
    def points(self) -> tuple[Point2, ...]:
        return self._points

    @property
    def abscissas(self) -> NDArray[np.float64]:
        """Read-only cumulative abscissa of each vertex."""
        return self._abscissas

    def length(self) -> float:
        return float(self._abscissas[-1])

    def segment(self, index: int) -> Segment2:
        if not 0 <= index < len(self._points) - 1:
            raise IndexError(f"Segment index {index} out of range for {len(self)} points")
        return Segment2(self._points[index], self._points[index + 1])

    def normalized_abscissas(self) -> list[float]:
        """Vertex abscissas divided by the total length.

        A zero-length polyline has no meaningful normalization and
        contributes only 0.0. Otherwise the last value is exactly 1.0.
        """
        total = self.length()
        if total == 0.0:
            return [0.0]
        normalized = [clamp(float(a) / total, 0.0, 1.0) for a in self._abscissas]
        normalized[-1] = 1.0
        return normalized

    def _check_range(self, abscissa: float) -> float:
        total = self.length()
        slack = self.config.range_tolerance * max(1.0, total)
        if math.isnan(abscissa) or abscissa < -slack or abscissa > total + slack:
            raise OutOfRangeError(abscissa, total)
        return clamp(abscissa, 0.0, total)

    def find_segment(self, abscissa: float) -> int:
        """Index ``i`` of the segment with ``abscissas[i] <= d <= abscissas[i+1]``.

        Returns -1 for a single-point polyline, which has no segment.
        """
        return self._find_segment(self._check_range(float(abscissa)))

    def _find_segment(self, d: float) -> int:
        # d is already range-checked and clamped
        n = len(self._points)
        if n < 2:
            return -1
        # side="right" skips past zero-length segments that end at d
        i = int(np.searchsorted(self._abscissas, d, side="right")) - 1
        return min(max(i, 0), n - 2)

    def interpolate(self, abscissa: float) -> Point2:
        """Point at arc-length distance ``abscissa`` from the first vertex.

        Raises OutOfRangeError when ``abscissa`` is outside ``[0, length]``
        beyond the configured tolerance.
        """
        d = self._check_range(float(abscissa))
        i = self._find_segment(d)
        if i < 0:
            return self._points[0]

        start = float(self._abscissas[i])
        end = float(self._abscissas[i + 1])
        if end == start:
            return self._points[i]

        k = (d - start) / (end - start)
        segment = self.segment(i)
        return segment.source + segment.to_vector() * self.kernel.coerce(k)
