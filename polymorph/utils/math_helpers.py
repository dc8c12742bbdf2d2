"""Math helpers — tolerant merging and clamping. No engine imports."""

from __future__ import annotations

from collections.abc import Iterable


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def merge_sorted_unique(
    values: Iterable[float],
    tolerance: float = 1e-9,
    anchors: Iterable[float] = (),
) -> list[float]:
    """Sort values and coalesce runs closer than ``tolerance``.

    The first value of each run is kept, unless the run contains one of
    ``anchors`` (e.g. 0.0 or 1.0), in which case the anchor is kept.
    A run that starts at an anchor keeps that anchor.
    Comparisons are made against the first value of the run so a slow
    drift of many small steps does not collapse into one value.
    """
    pinned = set(anchors)
    merged: list[float] = []
    run_start: float | None = None
    for v in sorted(values):
        if run_start is not None and v - run_start <= tolerance:
            # An anchor replaces the run start, but never another anchor
            if v in pinned and merged[-1] not in pinned:
                merged[-1] = v
            continue
        merged.append(v)
        run_start = v
    return merged
