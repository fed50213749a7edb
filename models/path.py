from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from models.point import Point2D

MOVE = "move"
LINE = "line"


@dataclass
class StarPath:
    """
    Closed drawable path: one move-to, then line-to commands, the last of
    which returns to the starting point.
    """

    commands: List[Tuple[str, Point2D]] = field(default_factory=list)

    def move_to(self, point: Point2D):
        self.commands.append((MOVE, point))

    def line_to(self, point: Point2D):
        self.commands.append((LINE, point))

    # -------------------------------------------------------------
    #   Views
    # -------------------------------------------------------------

    def vertices(self) -> List[Point2D]:
        """Translated vertices without the closing repeat."""
        return [pt for _, pt in self.commands[:-1]]

    def edges(self) -> List[Tuple[Point2D, Point2D]]:
        pts = [pt for _, pt in self.commands]
        return list(zip(pts[:-1], pts[1:]))

    def to_array(self) -> np.ndarray:
        """
        (N, 2) float array of the vertices, as expected by cv2.polylines
        after rounding to int32.
        """
        return np.array([p.to_array() for p in self.vertices()], dtype=np.float64)

    def __len__(self):
        return len(self.commands)
