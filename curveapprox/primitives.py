"""
2D geometric primitives which can be approximated by points.

All primitives are immutable and parametrised by the coordinate space their
points live in.
"""

import math
from dataclasses import dataclass
from typing import Generic, Iterator

from .approximate import ApproximatedArc
from .constants import PRECISION
from .geom_types import Angle, Point2D, Space, Vector2D


@dataclass(frozen=True)
class Line(Generic[Space]):
    """A 2D line segment. ``start`` and ``end`` may be the same point."""

    start: Point2D[Space]
    end: Point2D[Space]

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def direction(self) -> Vector2D[Space]:
        return self.end - self.start

    def approximate(self, tolerance: float) -> Iterator[Point2D[Space]]:
        """A chord is its own best approximation, so this is always ``[start, end]``."""
        return iter((self.start, self.end))


@dataclass(frozen=True)
class Arc(Generic[Space]):
    """
    A circular arc.

    Args:
        centre: Centre of the circle the arc lies on
        radius: Radius of that circle, must not be negative
        start_angle: Direction of the start point as seen from the centre
        sweep_angle: Angle swept from start to end, positive is anticlockwise
    """

    centre: Point2D[Space]
    radius: float
    start_angle: Angle
    sweep_angle: Angle

    def __post_init__(self):
        if not math.isfinite(self.radius) or self.radius < 0:
            raise ValueError(
                f"Arc radius must be a finite, non-negative number, got {self.radius}"
            )
        if not math.isfinite(self.start_angle.radians):
            raise ValueError(f"Arc start angle must be finite, got {self.start_angle}")
        if not math.isfinite(self.sweep_angle.radians):
            raise ValueError(f"Arc sweep angle must be finite, got {self.sweep_angle}")

    @classmethod
    def from_centre_radius(
        cls,
        centre: Point2D[Space],
        radius: float,
        start_angle: Angle,
        sweep_angle: Angle,
    ) -> "Arc[Space]":
        return cls(centre, float(radius), start_angle, sweep_angle)

    @classmethod
    def from_three_points(
        cls, start: Point2D[Space], mid: Point2D[Space], end: Point2D[Space]
    ) -> "Arc[Space]":
        """
        Create the arc which goes from ``start`` through ``mid`` to ``end``.

        Raises:
            ValueError: If the points are collinear or coincide, in which case
                there is no circle through them.
        """
        ab = mid - start
        ac = end - start
        ab_sq = ab.x * ab.x + ab.y * ab.y
        ac_sq = ac.x * ac.x + ac.y * ac.y
        det = 2.0 * ab.cross(ac)
        # |cross| = |ab| |ac| sin(angle), so compare the sine rather than the area
        if abs(det) <= 2.0 * PRECISION * math.sqrt(ab_sq * ac_sq):
            raise ValueError(
                f"Cannot fit an arc through collinear points {start}, {mid}, {end}"
            )

        # circumcentre relative to start
        offset = Vector2D(
            (ac.y * ab_sq - ab.y * ac_sq) / det,
            (ab.x * ac_sq - ac.x * ab_sq) / det,
        )
        centre = start + offset
        radius = offset.length()

        start_angle = math.atan2(start.y - centre.y, start.x - centre.x)
        end_angle = math.atan2(end.y - centre.y, end.x - centre.x)
        if det > 0:
            sweep = (end_angle - start_angle) % (2 * math.pi)
        else:
            sweep = -((start_angle - end_angle) % (2 * math.pi))

        return cls(centre, radius, Angle(start_angle), Angle(sweep))

    @property
    def end_angle(self) -> Angle:
        return self.start_angle + self.sweep_angle

    @property
    def start(self) -> Point2D[Space]:
        return self.point_at(Angle.zero())

    @property
    def end(self) -> Point2D[Space]:
        return self.point_at(self.sweep_angle)

    def point_at(self, angle: Angle) -> Point2D[Space]:
        """The point on the circle ``angle`` away from the start direction."""
        return self.centre + Vector2D.from_angle_and_length(
            self.start_angle + angle, self.radius
        )

    def is_clockwise(self) -> bool:
        return self.sweep_angle.radians < 0

    def is_anticlockwise(self) -> bool:
        return self.sweep_angle.radians > 0

    def is_minor_arc(self) -> bool:
        return self.sweep_angle.magnitude <= math.pi

    def approximate(self, tolerance: float) -> ApproximatedArc[Space]:
        return ApproximatedArc.from_arc(self, tolerance)


@dataclass(frozen=True)
class Circle(Generic[Space]):
    """A full circle, approximated as a closed loop starting at angle zero."""

    centre: Point2D[Space]
    radius: float

    def __post_init__(self):
        if not math.isfinite(self.radius) or self.radius < 0:
            raise ValueError(
                f"Circle radius must be a finite, non-negative number, got {self.radius}"
            )

    def to_arc(self) -> Arc[Space]:
        return Arc(self.centre, self.radius, Angle.zero(), Angle.two_pi())

    def approximate(self, tolerance: float) -> ApproximatedArc[Space]:
        return self.to_arc().approximate(tolerance)
