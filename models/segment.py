import math

from models.point import Point2D
from utils.geometry import slope, y_intercept


class Segment:
    """
    Ordered pair of points on the outer ring of a star.

    Supports:
      - slope / intercept computation (inf / None when vertical)
      - x and y coordinate ranges for containment tests

    `scale` is the extent of the ring the segment belongs to, used to
    size the round-off tolerance.
    """

    # ------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------
    def __init__(self, start: Point2D, end: Point2D, scale: float = 1.0):
        self.start = start
        self.end = end
        self.scale = scale

        self.x1, self.y1 = start
        self.x2, self.y2 = end

        # slope & intercept
        self.m = slope(start, end, scale)
        self.b = y_intercept(start, self.m)

    # ------------------------------------------------------------
    # Basic geometric properties
    # ------------------------------------------------------------
    @property
    def is_vertical(self):
        return math.isinf(self.m)

    @property
    def x_range(self):
        return min(self.x1, self.x2), max(self.x1, self.x2)

    @property
    def y_range(self):
        return min(self.y1, self.y2), max(self.y1, self.y2)

    def y_at(self, x):
        """y on the infinite line through the segment; undefined when vertical."""
        return self.m * x + self.b

    # ------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------
    def __repr__(self):
        return f"Segment(start={self.start}, end={self.end})"
