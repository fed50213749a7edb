"""
This module provides:
    - same_coordinate  (with auto tolerance from config)
    - slope
    - y_intercept
    - distance
    - slopes_parallel  (with auto tolerance from config)
    - line_intersect
    - polar_point
"""

import math

from config import get_active_params


# ----------------------------------------------------------------------
#  COORDINATE EQUALITY
# ----------------------------------------------------------------------

def same_coordinate(a, b, scale=1.0):
    """
    True when two coordinates differ only by trig round-off,
    e.g. 50 + 50 * cos(270°) vs 50.

    `scale` is the size of the figure the coordinates belong to; the
    absolute tolerance is a fraction of it.
    """
    params = get_active_params()
    return math.isclose(
        a, b,
        rel_tol=params["COORD_REL_TOL"],
        abs_tol=params["COORD_ABS_TOL"] * scale
    )


# ----------------------------------------------------------------------
#  SLOPE / INTERCEPT
# ----------------------------------------------------------------------

def slope(point1, point2, scale=1.0):
    """
    Rise over run between two (x, y) points.

    A zero run gives math.inf instead of raising ZeroDivisionError.
    """
    x1, y1 = point1
    x2, y2 = point2
    if same_coordinate(x1, x2, scale):
        return math.inf
    return (y2 - y1) / (x2 - x1)


def y_intercept(point, m):
    """b = y - m x, or None for a vertical line."""
    if math.isinf(m):
        return None
    x, y = point
    return y - m * x


# ----------------------------------------------------------------------
#  DISTANCE
# ----------------------------------------------------------------------

def distance(x1, y1, x2, y2):
    return math.hypot(x2 - x1, y2 - y1)


# ----------------------------------------------------------------------
#  PARALLEL CHECK (AUTO-TOLERANCE FROM CONFIG)
# ----------------------------------------------------------------------

def slopes_parallel(m1, m2, tolerance=None):
    """
    Returns True if two slopes describe parallel lines.

    Two vertical slopes are parallel. `tolerance` is relative; 0 is
    exact equality.
    """
    if tolerance is None:
        params = get_active_params()
        tolerance = params["PARALLEL_SLOPE_TOLERANCE"]

    if math.isinf(m1) or math.isinf(m2):
        return math.isinf(m1) and math.isinf(m2)

    return math.isclose(m1, m2, rel_tol=tolerance)


# ----------------------------------------------------------------------
#  LINE INTERSECTION
# ----------------------------------------------------------------------

def line_intersect(m1, b1, m2, b2):
    """
    Compute intersection point between two lines defined by:
        y = m1 x + b1
        y = m2 x + b2

    Returns:
        (x, y) or None if parallel (m1 == m2)
    """
    if m1 == m2:
        return None
    x = (b2 - b1) / (m1 - m2)
    y = m1 * x + b1
    return x, y


# ----------------------------------------------------------------------
#  POLAR → CARTESIAN (Y-DOWN)
# ----------------------------------------------------------------------

def polar_point(cx, cy, radius, degrees):
    """
    Point at `degrees` (counter-clockwise, 0 = +x) on a circle around
    (cx, cy), with y flipped for a top-left origin.
    """
    theta = math.radians(degrees)
    return cx + radius * math.cos(theta), cy - radius * math.sin(theta)
