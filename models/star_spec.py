from dataclasses import dataclass, field

from config import get_active_params
from models.errors import InvalidArgumentError


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned region a star is inscribed in. Must be square to be
    accepted by the geometry.
    """

    left: float
    top: float
    width: float
    height: float

    @classmethod
    def square(cls, size: float, left: float = 0.0, top: float = 0.0) -> "BoundingBox":
        return cls(left, top, size, size)

    @property
    def is_square(self) -> bool:
        return self.width == self.height

    @property
    def size(self) -> float:
        return self.width

    @property
    def center(self):
        return self.left + self.width / 2, self.top + self.height / 2


@dataclass(frozen=True)
class StarSpec:
    """
    Input parameter set for one star.

      num_points        number of star tips (>= 5)
      density           skip count when connecting ring vertices (>= 2)
      outlined          zig-zag silhouette instead of crossing lines
      rotation_degrees  counter-clockwise rotation about the box center
      box               square bounding box
    """

    num_points: int
    density: int
    outlined: bool = False
    rotation_degrees: float = 0.0
    box: BoundingBox = field(default_factory=lambda: BoundingBox.square(100.0))

    # -------------------------------------------------------------
    #   Derived values
    # -------------------------------------------------------------

    @property
    def radius(self) -> float:
        return self.box.size / 2

    @property
    def x_offset(self) -> float:
        return self.box.left

    @property
    def y_offset(self) -> float:
        return self.box.top

    @property
    def start_degrees(self) -> float:
        # +90 puts the first tip at the top of the box
        return 90 + self.rotation_degrees

    # -------------------------------------------------------------
    #   Presets
    # -------------------------------------------------------------

    @classmethod
    def from_preset(cls, name: str, box: BoundingBox, outlined: bool = False,
                    rotation_degrees: float = 0.0) -> "StarSpec":
        """
        Build a spec from a named entry of config.STAR_PRESETS.
        """
        presets = get_active_params()["STAR_PRESETS"]
        if name not in presets:
            raise InvalidArgumentError(f"unknown star preset: {name!r}")

        preset = presets[name]
        return cls(
            num_points=preset["NUM_POINTS"],
            density=preset["DENSITY"],
            outlined=outlined,
            rotation_degrees=rotation_degrees,
            box=box,
        )
