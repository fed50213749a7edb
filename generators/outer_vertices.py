"""
Outer vertex ring of a {num_points / density} star polygon.
"""

from typing import List

from config import get_active_params
from models.errors import InvalidArgumentError
from models.point import Point2D
from utils.geometry import polar_point


def check_star_counts(num_points: int, density: int):
    """
    Raises InvalidArgumentError unless num_points >= 5 and density >= 2.
    """
    params = get_active_params()

    if num_points < params["MIN_NUM_POINTS"]:
        raise InvalidArgumentError(
            f"number of points must be at least {params['MIN_NUM_POINTS']}, got {num_points}"
        )
    if density < params["MIN_DENSITY"]:
        raise InvalidArgumentError(
            f"density must be at least {params['MIN_DENSITY']}, got {density}"
        )


def make_outer_points(num_points: int, density: int, start_degrees: float, r: float) -> List[Point2D]:
    """
    Places num_points points on the circle of radius r centred at (r, r),
    each one density * (360 / num_points) degrees after the previous.

    Connecting them in order traces the {num_points / density} star
    instead of the convex polygon.
    """
    check_star_counts(num_points, density)

    degrees_between_points = 360 / num_points
    outer_points = []

    for i in range(num_points):
        x, y = polar_point(r, r, r, start_degrees + density * i * degrees_between_points)
        outer_points.append(Point2D(x, y))

    return outer_points
