"""
Utility Functions

Provides geometry operations, Bresenham wrappers and image I/O
helpers used across generators and visualization.
"""

from .geometry import (
    same_coordinate,
    slope,
    y_intercept,
    distance,
    slopes_parallel,
    line_intersect,
    polar_point,
)
from .bresenham_utils import bres_line, bres_circle
from .image_io import ensure_output_dir, save_image, new_canvas

__all__ = [
    "same_coordinate",
    "slope",
    "y_intercept",
    "distance",
    "slopes_parallel",
    "line_intersect",
    "polar_point",
    "bres_line",
    "bres_circle",
    "ensure_output_dir",
    "save_image",
    "new_canvas",
]
