from dataclasses import dataclass
from typing import List

import numpy as np


@dataclass(frozen=True)
class Point2D:
    """
    Immutable 2D point in a top-left origin, y-down frame.
    """

    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    def translated(self, dx: float, dy: float) -> "Point2D":
        return Point2D(self.x + dx, self.y + dy)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def __repr__(self):
        return f"Point2D({self.x:.3f}, {self.y:.3f})"


# Ordered traversal of a closed path; never mutated after creation
PointSequence = List[Point2D]
