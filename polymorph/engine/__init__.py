"""polymorph arc-length morphing engine."""

from polymorph.engine.arc_length import LengthIndexedPolyline
from polymorph.engine.config import MorphConfig
from polymorph.engine.morphing import PolylineMorphing, morph

__all__ = [
    "LengthIndexedPolyline",
    "MorphConfig",
    "PolylineMorphing",
    "morph",
]
