"""Polyline morphing — pair two polylines by normalized arc length.

The shared parameter set is the union of both polylines' vertex
parameters rather than a uniform resampling, so every original vertex of
either polyline lands on at least one correspondence segment.

The longest correspondence segment is an upper-bound *estimate* of the
Hausdorff and Fréchet distances between the two polylines. The bound is a
heuristic and is not proven here; do not treat it as an exact distance.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from polymorph.engine.arc_length import LengthIndexedPolyline
from polymorph.engine.config import MorphConfig
from polymorph.geometry.kernel import Kernel
from polymorph.geometry.primitives import Segment2
from polymorph.utils.math_helpers import merge_sorted_unique

logger = logging.getLogger(__name__)


class PolylineMorphing:
    """Correspondence between a source and a target polyline."""

    def __init__(
        self,
        source_points: Iterable[Any],
        target_points: Iterable[Any],
        kernel: Kernel | None = None,
        config: MorphConfig | None = None,
    ) -> None:
        self.config = config or MorphConfig()
        self._source = LengthIndexedPolyline(source_points, kernel=kernel, config=self.config)
        self._target = LengthIndexedPolyline(target_points, kernel=kernel, config=self.config)
        self._breakpoints = tuple(self._normalized_breakpoints())

        logger.debug(
            "Morph: source %d pts (length %.6g), target %d pts (length %.6g), %d breakpoints",
            len(self._source),
            self._source.length(),
            len(self._target),
            self._target.length(),
            len(self._breakpoints),
        )

    @property
    def source(self) -> LengthIndexedPolyline:
        return self._source

    @property
    def target(self) -> LengthIndexedPolyline:
        return self._target

    @property
    def breakpoints(self) -> tuple[float, ...]:
        """Normalized breakpoint set, ascending, starting at 0.0."""
        return self._breakpoints

    def _normalized_breakpoints(self) -> list[float]:
        values: list[float] = []
        for line in (self._source, self._target):
            if line.length() == 0.0:
                logger.debug("Zero-length polyline contributes only parameter 0.0")
            values.extend(line.normalized_abscissas())
        return merge_sorted_unique(
            values,
            tolerance=self.config.merge_tolerance,
            anchors=(0.0, 1.0),
        )

    def build_transform_segments(self) -> list[Segment2]:
        """One segment per breakpoint, from the source point to the target point."""
        source_length = self._source.length()
        target_length = self._target.length()
        return [
            Segment2(
                self._source.interpolate(t * source_length),
                self._target.interpolate(t * target_length),
            )
            for t in self._breakpoints
        ]

    def max_segment_length(self) -> float:
        """Longest correspondence segment.

        Upper-bound estimate of the Hausdorff/Fréchet distance, not an exact value.
        """
        return max(segment.length() for segment in self.build_transform_segments())


def morph(
    source_points: Iterable[Any],
    target_points: Iterable[Any],
    kernel: Kernel | None = None,
) -> list[Segment2]:
    """Shortcut for ``PolylineMorphing(...).build_transform_segments()``."""
    return PolylineMorphing(source_points, target_points, kernel=kernel).build_transform_segments()
