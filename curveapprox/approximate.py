"""
Tolerance driven approximation of curves by points.

Every shape exposes ``approximate(tolerance)`` which returns a lazy iterator
over points that starts at the shape's start and ends at its end. Joining the
points with straight lines never strays further than ``tolerance`` from the
real curve, except when the tolerance is too coarse to honour (see
:func:`subdivide_arc`), in which case a single chord is used.
"""

import logging
import math
from typing import (
    TYPE_CHECKING,
    Generic,
    Iterable,
    Iterator,
    Optional,
    Protocol,
    Tuple,
)

import numpy as np

from .constants import DEFAULT_TOLERANCE, MIN_ARC_STEPS
from .geom_types import Angle, Point2D, Space

if TYPE_CHECKING:
    from .primitives import Arc

logger = logging.getLogger(__name__)


class Approximate(Protocol):
    """Anything which can be approximated by a sequence of points."""

    def approximate(self, tolerance: float) -> Iterator[Point2D]:
        """Approximate the shape, keeping the resulting path within ``tolerance`` units of it."""
        ...


def approximate(
    shape: Approximate, tolerance: float = DEFAULT_TOLERANCE
) -> Iterator[Point2D]:
    return shape.approximate(tolerance)


def chord_deviation(radius: float, angle: Angle) -> float:
    """
    The sagitta of a chord spanning ``angle`` on a circle of ``radius``.

    That is the largest distance between the chord and the arc it cuts off,
    ``R * (1 - cos(angle / 2))``.
    """
    return radius * (1.0 - math.cos(angle.magnitude / 2.0))


def subdivide_arc(arc: "Arc", tolerance: float) -> Tuple[int, Angle]:
    """
    Work out how many equal steps an arc needs to stay within ``tolerance``.

    Draw a chord between points A and B on a circle with centre C, and a line
    bisecting the angle ACB which meets the chord at D. The distance from D to
    the arc is the deviation, so ``|CD| + tolerance = R``. From the right
    triangle DCB::

        cos(θ/2) = |CD| / R = 1 - tolerance / R

    where θ is the angle swept by a chord with the desired deviation, giving
    ``N = ceil(|sweep| / θ)`` chords.

    A tolerance which is not positive, or not smaller than the radius, can't
    be honoured by any number of chords worth computing, so the whole sweep is
    covered by one chord. This also covers ``tolerance > 2 * radius`` where
    ``1 - tolerance / R`` leaves the domain of ``acos``. A tolerance so small
    relative to the radius that ``1 - tolerance / R`` rounds to exactly 1, or
    that the step count overflows, falls back to the single chord as well and
    logs a warning.

    Returns:
        ``(steps, step_size)`` where ``step_size`` carries the sign of the sweep.
    """
    radius = arc.radius
    sweep = arc.sweep_angle

    if math.isnan(tolerance):
        logger.warning("NaN tolerance, approximating arc with a single chord")
        return 1, sweep

    if tolerance <= 0.0 or radius <= tolerance:
        return 1, sweep

    cos_theta_on_two = 1.0 - tolerance / radius
    theta = math.acos(cos_theta_on_two) * 2.0
    if theta == 0.0:
        # tolerance / radius is below float resolution, 1 - T/R rounds to 1
        logger.warning(
            f"Tolerance {tolerance} is too small for radius {radius}, "
            f"approximating arc with a single chord"
        )
        return 1, sweep

    line_segment_count = max(sweep.magnitude / theta, MIN_ARC_STEPS)
    if math.isinf(line_segment_count):
        logger.warning(
            f"Arc with sweep {sweep.radians} needs more steps than can be "
            f"counted at tolerance {tolerance}, approximating with a single chord"
        )
        return 1, sweep

    steps = math.ceil(line_segment_count)
    step_size = sweep / steps
    logger.debug(
        f"Arc with radius {radius} and sweep {sweep.radians} split into "
        f"{steps} steps of {step_size.radians} rad (tolerance {tolerance})"
    )
    return steps, step_size


class ApproximatedArc(Generic[Space]):
    """
    An iterator over the points in an arc approximation.

    This shouldn't be created directly, you are probably looking for
    ``Arc.approximate()``. It yields ``steps + 1`` points, the first being the
    arc's start and the last its end, and can only be consumed once.
    """

    def __init__(self, arc: "Arc[Space]", steps: int, step_size: Angle):
        self._i = 0
        self._steps = steps
        self._step_size = step_size
        self._arc = arc

    @classmethod
    def from_arc(cls, arc: "Arc[Space]", tolerance: float) -> "ApproximatedArc[Space]":
        steps, step_size = subdivide_arc(arc, tolerance)
        return cls(arc, steps, step_size)

    @property
    def arc(self) -> "Arc[Space]":
        return self._arc

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def step_size(self) -> Angle:
        return self._step_size

    def __iter__(self) -> "ApproximatedArc[Space]":
        return self

    def __next__(self) -> Point2D[Space]:
        if self._i > self._steps:
            raise StopIteration

        if self._i == self._steps:
            # land exactly on the end point instead of steps * step_size
            angle = self._arc.sweep_angle
        else:
            angle = Angle(self._i * self._step_size.radians)
        point = self._arc.point_at(angle)
        self._i += 1
        return point

    def __length_hint__(self) -> int:
        return max(self._steps + 1 - self._i, 0)

    def __repr__(self):
        return (
            f"ApproximatedArc(i={self._i}, steps={self._steps}, "
            f"step_size={self._step_size.radians})"
        )


def approximate_chain(
    shapes: Iterable[Approximate], tolerance: float = DEFAULT_TOLERANCE
) -> Iterator[Point2D]:
    """
    Approximate consecutive shapes as one path.

    A point equal to the one yielded just before it (the joint between two
    connected shapes) is only yielded once.
    """
    previous: Optional[Point2D] = None
    for shape in shapes:
        for point in shape.approximate(tolerance):
            if point != previous:
                yield point
            previous = point


def to_array(points: Iterable[Point2D]) -> np.ndarray:
    """Collect points into an ``(n, 2)`` float array."""
    coords = [(point.x, point.y) for point in points]
    if not coords:
        return np.empty((0, 2), dtype=np.float64)
    return np.asarray(coords, dtype=np.float64)
