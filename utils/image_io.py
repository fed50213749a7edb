"""
Image I/O utilities for the star renderer.

This module provides:
    • ensure_output_dir(path)
    • save_image(path, image)
    • new_canvas(size, color)
"""

import os

import cv2
import numpy as np


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray) -> bool:
    """
    Save an image to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    return cv2.imwrite(path, image)


# -------------------------------------------------------------------------
#  BLANK CANVAS
# -------------------------------------------------------------------------

def new_canvas(size: int, color=(255, 255, 255)) -> np.ndarray:
    """
    Square BGR uint8 image filled with a single color.
    """
    canvas = np.zeros((size, size, 3), dtype=np.uint8)
    canvas[:] = color
    return canvas
