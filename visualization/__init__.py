"""
Visualization Tools

Provides drawing utilities for:
- Star paths (stroked or filled)
- Guide circles
- Outline masks
"""

from .draw_star import draw_star_path, draw_guide_circles, path_to_polyline
from .outline_mask import build_outline_mask
from .save_outputs import render_star, save_star_outputs

__all__ = [
    "draw_star_path",
    "draw_guide_circles",
    "path_to_polyline",
    "build_outline_mask",
    "render_star",
    "save_star_outputs",
]
