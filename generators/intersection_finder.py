"""
First self-intersection of a star's outer ring.

This module provides:
    • find_first_intersection(points, slope_tolerance)
    • find_inner_radius(points, r, slope_tolerance)

The ring is walked as a closed polyline (segment i joins point i to
point i + 1, wrapping). Only segment 0 is tested against the others.
"""

from typing import List, Optional

from models.errors import GeometryError
from models.point import Point2D
from models.segment import Segment
from utils.geometry import distance, line_intersect, same_coordinate, slopes_parallel


# ----------------------------------------------------------------------
#  RING → SEGMENTS
# ----------------------------------------------------------------------

def ring_scale(points: List[Point2D]) -> float:
    """Largest absolute coordinate on the ring (about 2r for a centred ring)."""
    return max(max(abs(p.x), abs(p.y)) for p in points)


def ring_segments(points: List[Point2D]) -> List[Segment]:
    n = len(points)
    scale = ring_scale(points)
    return [Segment(points[i], points[(i + 1) % n], scale) for i in range(n)]


# ----------------------------------------------------------------------
#  TWO-LINE SOLVE
# ----------------------------------------------------------------------

def solve_lines(first: Segment, other: Segment, slope_tolerance=None):
    """
    Intersection of the infinite lines through two segments.

    Returns:
        (x, y) or None if the lines are parallel
    """
    if slopes_parallel(first.m, other.m, slope_tolerance):
        return None

    # A vertical line pins x; y comes from the other line.
    if first.is_vertical:
        return first.x1, other.y_at(first.x1)
    if other.is_vertical:
        return other.x1, first.y_at(other.x1)

    # y = first.m * x + first.b
    # y = other.m * x + other.b
    # x = (other.b - first.b) / (first.m - other.m)
    return line_intersect(first.m, first.b, other.m, other.b)


# ----------------------------------------------------------------------
#  RANGE CHECK
# ----------------------------------------------------------------------

def _strictly_within(value, scale, *ranges):
    """
    Open-interval test against the overlap of several (low, high) ranges.

    Zero-width ranges are left out: a horizontal or vertical segment
    already fixes that coordinate through its line equation.
    """
    bounded = [(low, high) for low, high in ranges if not same_coordinate(low, high, scale)]
    if not bounded:
        return False

    start = max(low for low, _ in bounded)
    end = min(high for _, high in bounded)

    # A shared ring vertex only reaches the bound up to round-off
    if same_coordinate(value, start, scale) or same_coordinate(value, end, scale):
        return False
    return start < value < end


def crossing_point(first: Segment, other: Segment, slope_tolerance=None) -> Optional[Point2D]:
    """
    Point where two segments cross strictly inside both, or None.
    Shared endpoints do not count.
    """
    solved = solve_lines(first, other, slope_tolerance)
    if solved is None:
        return None

    x, y = solved
    scale = max(first.scale, other.scale)
    if not _strictly_within(x, scale, first.x_range, other.x_range):
        return None
    if not _strictly_within(y, scale, first.y_range, other.y_range):
        return None

    return Point2D(x, y)


# ----------------------------------------------------------------------
#  FIRST INTERSECTION
# ----------------------------------------------------------------------

def find_first_intersection(points: List[Point2D], slope_tolerance=None) -> Point2D:
    """
    Returns the crossing of segment 0 with the lowest-indexed later segment.

    Segment 1 and the last segment share an endpoint with segment 0 and
    are never tested.

    Raises:
        GeometryError if segment 0 crosses nothing
    """
    segments = ring_segments(points)
    first = segments[0]

    for other in segments[2:-1]:
        hit = crossing_point(first, other, slope_tolerance)
        if hit is not None:
            return hit

    # No crossing means the ring never folds over itself
    raise GeometryError(
        f"{len(points)}-point ring does not intersect itself; not a valid star polygon. "
        "Are the number of points and density valid?"
    )


def find_inner_radius(points: List[Point2D], r: float, slope_tolerance=None) -> float:
    """
    Distance from the ring centre (r, r) to the first self-intersection.
    """
    hit = find_first_intersection(points, slope_tolerance)
    return distance(r, r, hit.x, hit.y)
