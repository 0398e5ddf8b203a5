"""Trace implicit polynomial curves with Newton sampling, quadtrees, curvature and a view camera."""

__version__ = "0.1.0"
__all__ = ["point", "quadtree", "polynomial", "camera"]