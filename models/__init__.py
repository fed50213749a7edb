"""
Data Models

Defines the core data structures:
- Point2D
- Segment
- BoundingBox / StarSpec
- StarPath
- error types
"""

from .point import Point2D, PointSequence
from .segment import Segment
from .star_spec import BoundingBox, StarSpec
from .path import StarPath
from .errors import StarPolygonError, InvalidArgumentError, GeometryError

__all__ = [
    "Point2D",
    "PointSequence",
    "Segment",
    "BoundingBox",
    "StarSpec",
    "StarPath",
    "StarPolygonError",
    "InvalidArgumentError",
    "GeometryError",
]
