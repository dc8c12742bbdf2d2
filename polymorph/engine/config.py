"""Engine configuration — numeric tolerances."""

from __future__ import annotations

from dataclasses import dataclass

from polymorph.geometry.kernel import Kernel


@dataclass(frozen=True)
class MorphConfig:
    """Tolerances shared by the arc-length polyline and the morph builder."""

    # Relative slack on interpolate() bounds, scaled by max(1, length).
    range_tolerance: float = 1e-9

    # Normalized abscissas closer than this are one breakpoint.
    merge_tolerance: float = 1e-9

    kernel: Kernel = Kernel.INEXACT

    def __post_init__(self) -> None:
        if not 0.0 <= self.range_tolerance < 1.0:
            raise ValueError(f"range_tolerance must be in [0, 1), got {self.range_tolerance}")
        # At 1.0 or above the 0.0 and 1.0 breakpoints would fall in one run
        if not 0.0 <= self.merge_tolerance < 1.0:
            raise ValueError(f"merge_tolerance must be in [0, 1), got {self.merge_tolerance}")
