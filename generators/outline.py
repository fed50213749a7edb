from typing import List

from models.point import Point2D
from utils.geometry import polar_point


def make_outline_points(vertex_count: int, start_degrees: float, outer_radius: float,
                        inner_radius: float) -> List[Point2D]:
    """
    Zig-zag silhouette: vertex_count points evenly spaced around
    (outer_radius, outer_radius), even indices on the outer radius and
    odd indices on the inner radius.
    """
    degrees_between_points = 360 / vertex_count
    outline_points = []

    for i in range(vertex_count):
        radius = outer_radius if i % 2 == 0 else inner_radius
        x, y = polar_point(outer_radius, outer_radius, radius,
                           start_degrees + i * degrees_between_points)
        outline_points.append(Point2D(x, y))

    return outline_points
