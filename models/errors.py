"""
Error types raised by the star-polygon geometry.

    • StarPolygonError      common base
    • InvalidArgumentError  bad input, raised before any geometry runs
    • GeometryError         the {n/d} ring never crosses itself
"""


class StarPolygonError(Exception):
    """Base class for every error raised while computing a star."""


class InvalidArgumentError(StarPolygonError, ValueError):
    """
    Raised for a non-square bounding box, num_points < 5, density < 2,
    an unknown preset name, or an empty point sequence.
    """


class GeometryError(StarPolygonError, ArithmeticError):
    """
    Raised when the first segment of the outer ring crosses no later
    segment, so no inner radius exists for the outline.
    """
