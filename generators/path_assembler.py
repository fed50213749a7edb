from typing import List

from models.errors import InvalidArgumentError
from models.path import StarPath
from models.point import Point2D


def assemble_path(points: List[Point2D], x_offset: float = 0.0, y_offset: float = 0.0) -> StarPath:
    """
    Translates the points by (x_offset, y_offset) and builds a closed path:
    move to the first, line to each following point, then line back to
    the first.
    """
    if not points:
        raise InvalidArgumentError("cannot assemble a path from an empty point sequence")

    path = StarPath()
    for i, point in enumerate(points):
        shifted = point.translated(x_offset, y_offset)
        if i == 0:
            path.move_to(shifted)
        else:
            path.line_to(shifted)

    path.line_to(points[0].translated(x_offset, y_offset))
    return path
