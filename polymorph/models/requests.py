"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from polymorph.geometry.kernel import Kernel


class MorphRequest(BaseModel):
    source: list[tuple[float, float]] = Field(..., description="Source polyline as [x, y] pairs")
    target: list[tuple[float, float]] = Field(..., description="Target polyline as [x, y] pairs")
    kernel: Kernel | None = Field(
        default=None,
        description="Numeric kernel (inexact or exact); server default when omitted",
    )


class InterpolateRequest(BaseModel):
    points: list[tuple[float, float]] = Field(..., description="Polyline as [x, y] pairs")
    abscissa: float = Field(..., description="Arc-length distance from the first point")
    kernel: Kernel | None = None
