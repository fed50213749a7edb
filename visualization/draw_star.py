"""
Visualization utilities for rendering star paths.

This module provides:
    • draw_star_path(img, path, color, thickness, filled)
    • draw_guide_circles(img, spec, inner_radius, color)

Used by:
    - main.py
    - visualization.save_outputs
"""

from typing import Optional, Tuple

import cv2
import numpy as np

from models.path import StarPath
from models.star_spec import StarSpec
from utils.bresenham_utils import bres_circle


# ---------------------------------------------------------------------
#  PATH → PIXELS
# ---------------------------------------------------------------------

def path_to_polyline(path: StarPath) -> np.ndarray:
    """
    Rounds the path vertices to the (N, 1, 2) int32 layout OpenCV expects.
    """
    return np.round(path.to_array()).astype(np.int32).reshape(-1, 1, 2)


def draw_star_path(
    image,
    path: StarPath,
    color: Tuple[int, int, int] = (0, 0, 0),
    thickness: int = 1,
    filled: bool = False
):
    """
    Draws a closed StarPath onto an image.

    Args:
        image: BGR numpy array (modified in-place)
        path: StarPath from compute_star_path / assemble_path
        color: (B, G, R)
        thickness: stroke width, ignored when filled
        filled: fill the polygon instead of stroking it
    """
    polyline = path_to_polyline(path)

    if filled:
        cv2.fillPoly(image, [polyline], color)
    else:
        cv2.polylines(image, [polyline], isClosed=True, color=color, thickness=thickness)

    return image


# ---------------------------------------------------------------------
#  GUIDES: outer circle and, for outlined stars, inner circle
# ---------------------------------------------------------------------

def _plot(image, pixels, color):
    h, w = image.shape[:2]
    for x, y in pixels:
        if 0 <= x < w and 0 <= y < h:
            image[y, x] = color


def draw_guide_circles(
    image,
    spec: StarSpec,
    inner_radius: Optional[float] = None,
    color: Tuple[int, int, int] = (200, 200, 200)
):
    """
    Plots the circumscribed circle of the star and, when an inner radius
    is given, the circle through its inner notches.
    """
    cx, cy = spec.box.center
    cx, cy = int(round(cx)), int(round(cy))

    _plot(image, bres_circle(cx, cy, int(round(spec.radius))), color)

    if inner_radius is not None:
        _plot(image, bres_circle(cx, cy, int(round(inner_radius))), color)

    return image
