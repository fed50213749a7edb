"""
Generators Package

Contains the star-polygon geometry engine:
- Outer vertex ring
- First self-intersection / inner radius
- Outline (zig-zag silhouette)
- Path assembly
"""

from .outer_vertices import make_outer_points, check_star_counts
from .intersection_finder import (
    find_first_intersection,
    find_inner_radius,
    crossing_point,
)
from .outline import make_outline_points
from .path_assembler import assemble_path
from .star_polygon import (
    validate_spec,
    compute_star_outline,
    compute_inner_radius,
    compute_star_path,
    outline_inner_radius,
)

__all__ = [
    "make_outer_points",
    "check_star_counts",
    "find_first_intersection",
    "find_inner_radius",
    "crossing_point",
    "make_outline_points",
    "assemble_path",
    "validate_spec",
    "compute_star_outline",
    "compute_inner_radius",
    "compute_star_path",
    "outline_inner_radius",
]
