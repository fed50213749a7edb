"""
Centralized output-saving utilities for the star renderer.

This module provides:
    • render_star(spec, path, inner_radius)
    • save_star_outputs(...)

Uses draw modules to visualize and utils.image_io for filesystem handling.
"""

import numpy as np

from config import get_active_params, COLOR_BACKGROUND, COLOR_STAR, COLOR_EDGE, COLOR_GUIDE
from models.path import StarPath
from models.star_spec import StarSpec
from visualization.draw_star import draw_star_path, draw_guide_circles
from visualization.outline_mask import build_outline_mask
from utils.image_io import save_image, ensure_output_dir, new_canvas


# -------------------------------------------------------------------------
#   Render one star
# -------------------------------------------------------------------------

def render_star(spec: StarSpec, path: StarPath, inner_radius: float = None, image_size: int = None):
    """
    Draws an already computed star path onto a fresh canvas.

    inner_radius is only needed for the inner guide circle.

    Returns:
        image: BGR uint8 render
        mask:  uint8 outline mask (0 / 255)
    """
    params = get_active_params()
    if image_size is None:
        image_size = params["IMAGE_SIZE"]

    image = new_canvas(image_size, COLOR_BACKGROUND)

    if params["DRAW_GUIDES"]:
        draw_guide_circles(image, spec, inner_radius, COLOR_GUIDE)

    if params["FILLED"]:
        draw_star_path(image, path, COLOR_STAR, filled=True)
        draw_star_path(image, path, COLOR_EDGE, thickness=params["LINE_THICKNESS"])
    else:
        draw_star_path(image, path, COLOR_STAR, thickness=params["LINE_THICKNESS"])

    mask = build_outline_mask(path, image.shape[:2])
    return image, mask


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_star_outputs(output_dir: str, name: str, image: np.ndarray, mask: np.ndarray):
    """
    Saves every output artifact for one rendered star.

    Example output:
        <name>_star.png
        <name>_mask.png
    """

    ensure_output_dir(output_dir)

    # 1) Rendered star
    save_image(f"{output_dir}/{name}_star.png", image)

    # 2) Outline mask
    if mask.dtype != np.uint8:
        mask = mask.astype(np.uint8)
    save_image(f"{output_dir}/{name}_mask.png", mask)
