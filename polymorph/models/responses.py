"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from polymorph.geometry.primitives import Point2, Segment2


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class PointModel(BaseModel):
    x: float
    y: float

    @classmethod
    def from_point(cls, p: Point2) -> PointModel:
        x, y = p.as_tuple()
        return cls(x=x, y=y)


class SegmentModel(BaseModel):
    source: PointModel
    target: PointModel
    length: float = 0.0

    @classmethod
    def from_segment(cls, segment: Segment2) -> SegmentModel:
        return cls(
            source=PointModel.from_point(segment.source),
            target=PointModel.from_point(segment.target),
            length=segment.length(),
        )


class MorphResponse(BaseModel):
    segments: list[SegmentModel] = Field(default_factory=list)
    breakpoints: list[float] = Field(default_factory=list)
    source_length: float = 0.0
    target_length: float = 0.0
    # Upper-bound estimate of Hausdorff/Fréchet distance, not exact
    max_segment_length: float = 0.0


class InterpolateResponse(BaseModel):
    point: PointModel
    segment_index: int = -1
    length: float = 0.0


class ErrorResponse(BaseModel):
    detail: str
    error: str
