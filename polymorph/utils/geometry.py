"""Leaf-node array helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from polymorph.geometry.primitives import Point2


def points_to_array(points: Sequence[Point2]) -> NDArray[np.float64]:
    """Nx2 float array of point coordinates."""
    if len(points) == 0:
        return np.empty((0, 2))
    return np.array([p.as_tuple() for p in points], dtype=np.float64)


def arc_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cumulative arc-length along a point sequence."""
    diffs = np.diff(points, axis=0)
    # hypot avoids overflow from squaring large coordinates
    segment_lengths = np.hypot(diffs[:, 0], diffs[:, 1])
    return np.concatenate([[0.0], np.cumsum(segment_lengths)])


def exact_arc_lengths(points: Sequence[Point2]) -> NDArray[np.float64]:
    """Cumulative arc-length where each coordinate difference is computed exactly.

    Only the per-segment length and the running sum are floating point.
    """
    segment_lengths = [(q - p).length() for p, q in zip(points[:-1], points[1:])]
    return np.concatenate([[0.0], np.cumsum(np.asarray(segment_lengths, dtype=np.float64))])
