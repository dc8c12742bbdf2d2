"""POST /api/morph and /api/interpolate — run the engine on request payloads."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from polymorph.config import settings
from polymorph.engine.arc_length import LengthIndexedPolyline
from polymorph.engine.morphing import PolylineMorphing
from polymorph.models.requests import InterpolateRequest, MorphRequest
from polymorph.models.responses import (
    InterpolateResponse,
    MorphResponse,
    PointModel,
    SegmentModel,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# Plain def: the engine is CPU-bound and synchronous, FastAPI runs it in a worker thread.
@router.post("/morph", response_model=MorphResponse)
def morph(request: MorphRequest) -> MorphResponse:
    morphing = PolylineMorphing(
        request.source,
        request.target,
        kernel=request.kernel or settings.default_kernel,
    )
    segments = [SegmentModel.from_segment(s) for s in morphing.build_transform_segments()]
    logger.info(
        "Morph: %d source pts, %d target pts -> %d segments",
        len(morphing.source),
        len(morphing.target),
        len(segments),
    )
    return MorphResponse(
        segments=segments,
        breakpoints=list(morphing.breakpoints),
        source_length=morphing.source.length(),
        target_length=morphing.target.length(),
        max_segment_length=max(s.length for s in segments),
    )


@router.post("/interpolate", response_model=InterpolateResponse)
def interpolate(request: InterpolateRequest) -> InterpolateResponse:
    line = LengthIndexedPolyline(request.points, kernel=request.kernel or settings.default_kernel)
    point = line.interpolate(request.abscissa)
    return InterpolateResponse(
        point=PointModel.from_point(point),
        segment_index=line.find_segment(request.abscissa),
        length=line.length(),
    )
