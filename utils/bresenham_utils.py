"""
Utility wrappers around the pybresenham library.

This module provides:
    • bres_line(x1, y1, x2, y2)
    • bres_circle(cx, cy, r)

These functions return lists of (x, y) integer pixel coordinates.
"""

from typing import List, Tuple

import pybresenham as bres


# -----------------------------------------------------------
#   Line wrapper
# -----------------------------------------------------------

def bres_line(x1: int, y1: int, x2: int, y2: int) -> List[Tuple[int, int]]:
    """
    Returns a list of integer pixel coordinates forming a Bresenham line.
    """
    return [(int(x), int(y)) for x, y in bres.line(x1, y1, x2, y2)]


# -----------------------------------------------------------
#   Circle wrapper
# -----------------------------------------------------------

def bres_circle(cx: int, cy: int, r: int) -> List[Tuple[int, int]]:
    """
    Returns a list of integer pixel coordinates forming a Bresenham circle.
    """
    if r < 0:
        return []
    return [(int(x), int(y)) for x, y in bres.circle(cx, cy, r)]
