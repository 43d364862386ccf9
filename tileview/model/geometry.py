"""Geometry value types.

Mirrors the small subset of 2D/3D geometry the tile cache log records:

* ``Point`` / ``Size``: plain float pairs.
* ``Rect``: origin + size (what tiles record).
* ``Box2D``: min/max corners (what tile tree nodes and clip boxes record).
* ``Transform3D``: 4x4 matrix, row-major, applied to row vectors (``p * M``).
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left origin and size."""

    origin: Point
    size: Size

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> "Rect":
        return cls(Point(x, y), Size(width, height))

    @property
    def min_x(self) -> float:
        return self.origin.x

    @property
    def min_y(self) -> float:
        return self.origin.y

    @property
    def max_x(self) -> float:
        return self.origin.x + self.size.width

    @property
    def max_y(self) -> float:
        return self.origin.y + self.size.height

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        """Return the four corners clockwise from the origin."""
        return (
            Point(self.min_x, self.min_y),
            Point(self.max_x, self.min_y),
            Point(self.max_x, self.max_y),
            Point(self.min_x, self.max_y),
        )


@dataclass(frozen=True)
class Box2D:
    """Axis-aligned rectangle given by its min and max corners."""

    min: Point
    max: Point

    def to_rect(self) -> Rect:
        return Rect(
            self.min,
            Size(self.max.x - self.min.x, self.max.y - self.min.y),
        )


@dataclass(frozen=True)
class Transform3D:
    """Picture-to-world transform.

    Attributes:
        m: Sixteen matrix entries in row-major order (``m11, m12, ... m44``).
            Points are transformed as row vectors, so the translation lives
            in ``m41, m42, m43``.
    """

    m: Tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.m) != 16:
            raise ValueError(f"Transform3D needs 16 entries, got {len(self.m)}")

    @classmethod
    def identity(cls) -> "Transform3D":
        return cls((1.0, 0.0, 0.0, 0.0,
                    0.0, 1.0, 0.0, 0.0,
                    0.0, 0.0, 1.0, 0.0,
                    0.0, 0.0, 0.0, 1.0))

    @classmethod
    def scale_translate(
        cls, sx: float, sy: float, tx: float = 0.0, ty: float = 0.0
    ) -> "Transform3D":
        """2D scale followed by translation."""
        return cls((sx, 0.0, 0.0, 0.0,
                    0.0, sy, 0.0, 0.0,
                    0.0, 0.0, 1.0, 0.0,
                    tx, ty, 0.0, 1.0))
