import numpy as np

from models.path import StarPath
from utils.bresenham_utils import bres_line


def build_outline_mask(path: StarPath, shape_hw):
    """
    Builds a binary pixel mask of the path edges.

    Every pixel on a Bresenham line between consecutive path points is
    set to 255; pixels outside the image are dropped.

    Parameters
    ----------
    path : StarPath
        Closed star path.
    shape_hw : tuple[int, int]
        Image height and width.

    Returns
    -------
    np.ndarray
        uint8 map, 255 on the outline and 0 elsewhere.
    """

    h, w = shape_hw
    mask = np.zeros((h, w), dtype=np.uint8)

    for start, end in path.edges():
        hits = bres_line(
            int(round(start.x)), int(round(start.y)),
            int(round(end.x)), int(round(end.y))
        )

        for x, y in hits:
            if 0 <= x < w and 0 <= y < h:
                mask[y, x] = 255

    return mask
