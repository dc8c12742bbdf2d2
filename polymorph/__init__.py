"""polymorph — arc-length correspondence between 2D polylines."""

__version__ = "0.1.0"
