"""
Public entry points for star-polygon geometry.

This module provides:
    • validate_spec(spec)
    • compute_star_outline(spec)
    • compute_inner_radius(spec)
    • compute_star_path(spec)
    • outline_inner_radius(spec, points)

Every call is independent: nothing is cached between calls, and no
partial result is returned on failure.
"""


from models.errors import InvalidArgumentError
from models.path import StarPath
from models.point import PointSequence
from models.star_spec import StarSpec
from utils.geometry import distance
from generators.outer_vertices import check_star_counts, make_outer_points
from generators.intersection_finder import find_inner_radius
from generators.outline import make_outline_points
from generators.path_assembler import assemble_path


# ========================================================================
# 1. INPUT VALIDATION
# ========================================================================

def validate_spec(spec: StarSpec):
    """
    Raises InvalidArgumentError for a non-square box, num_points < 5 or
    density < 2. Runs before any geometry.
    """
    if not spec.box.is_square:
        raise InvalidArgumentError(
            f"bounding box must be square, got {spec.box.width} x {spec.box.height}"
        )
    check_star_counts(spec.num_points, spec.density)


# ========================================================================
# 2. GEOMETRY
# ========================================================================

def compute_inner_radius(spec: StarSpec) -> float:
    """
    Radius of the notches between tips, from the first self-intersection
    of the {n/d} ring.

    Raises:
        InvalidArgumentError, GeometryError
    """
    validate_spec(spec)

    r = spec.radius
    outer_points = make_outer_points(spec.num_points, spec.density, spec.start_degrees, r)
    return find_inner_radius(outer_points, r)


def compute_star_outline(spec: StarSpec) -> PointSequence:
    """
    Ordered, closed point sequence for the star in box-local coordinates
    (centre at (r, r), no offset applied).

      outlined=False → num_points ring vertices in {n/d} order
      outlined=True  → 2 * num_points vertices alternating outer / inner

    Raises:
        InvalidArgumentError, GeometryError
    """
    validate_spec(spec)

    r = spec.radius
    start_degrees = spec.start_degrees
    outer_points = make_outer_points(spec.num_points, spec.density, start_degrees, r)

    if not spec.outlined:
        return outer_points

    inner_radius = find_inner_radius(outer_points, r)
    return make_outline_points(spec.num_points * 2, start_degrees, r, inner_radius)


def compute_star_path(spec: StarSpec) -> StarPath:
    """
    compute_star_outline() translated to the box's top-left corner and
    assembled into a closed move/line path.
    """
    points = compute_star_outline(spec)
    return assemble_path(points, spec.x_offset, spec.y_offset)


def outline_inner_radius(spec: StarSpec, points: PointSequence):
    """
    Inner radius read back from an outline compute_star_outline() already
    produced, or None for a plain {n/d} ring.
    """
    if not spec.outlined:
        return None
    r = spec.radius
    return distance(r, r, points[1].x, points[1].y)
