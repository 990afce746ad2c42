import math
from dataclasses import dataclass
from typing import Generic, Iterator, Tuple, TypeVar, Union, overload


class UnknownUnit:
    """Coordinate space used when the caller does not care which one it is."""


class WorldSpace:
    """Coordinates of the drawing/model."""


class ScreenSpace:
    """Coordinates of a rendered output (pixels, device units)."""


Space = TypeVar("Space")


@dataclass(frozen=True)
class Angle:
    """A signed angle stored in radians."""

    radians: float

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        return cls(float(radians))

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        return cls(math.radians(degrees))

    @classmethod
    def zero(cls) -> "Angle":
        return cls(0.0)

    @classmethod
    def frac_pi_2(cls) -> "Angle":
        return cls(math.pi / 2)

    @classmethod
    def pi(cls) -> "Angle":
        return cls(math.pi)

    @classmethod
    def two_pi(cls) -> "Angle":
        return cls(2 * math.pi)

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)

    @property
    def magnitude(self) -> float:
        """The unsigned size of the angle, in radians."""
        return abs(self.radians)

    def __neg__(self) -> "Angle":
        return Angle(-self.radians)

    def __add__(self, other: "Angle") -> "Angle":
        return Angle(self.radians + other.radians)

    def __sub__(self, other: "Angle") -> "Angle":
        return Angle(self.radians - other.radians)

    def __mul__(self, factor: float) -> "Angle":
        return Angle(self.radians * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Angle":
        return Angle(self.radians / divisor)

    def __str__(self):
        return f"Angle(radians={self.radians})"


@dataclass(frozen=True)
class Vector2D(Generic[Space]):
    x: float
    y: float

    @classmethod
    def from_angle_and_length(cls, angle: Angle, length: float) -> "Vector2D[Space]":
        return cls(length * math.cos(angle.radians), length * math.sin(angle.radians))

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def __add__(self, other: "Vector2D[Space]") -> "Vector2D[Space]":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D[Space]") -> "Vector2D[Space]":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2D[Space]":
        return Vector2D(-self.x, -self.y)

    def __mul__(self, factor: float) -> "Vector2D[Space]":
        return Vector2D(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Vector2D[Space]":
        return Vector2D(self.x / divisor, self.y / divisor)

    def cross(self, other: "Vector2D[Space]") -> float:
        """Z component of the 3D cross product; positive when ``other`` is anticlockwise."""
        return self.x * other.y - self.y * other.x


@dataclass(frozen=True)
class Point2D(Generic[Space]):
    """
    A location in a 2D coordinate space.

    Equality is exact floating point equality. The ``Space`` type parameter
    only exists for the type checker, e.g. ``Point2D[WorldSpace]`` and
    ``Point2D[ScreenSpace]`` cannot be mixed in annotated code.
    """

    x: float
    y: float

    @classmethod
    def zero(cls) -> "Point2D[Space]":
        return cls(0.0, 0.0)

    def __add__(self, offset: Vector2D[Space]) -> "Point2D[Space]":
        return Point2D(self.x + offset.x, self.y + offset.y)

    @overload
    def __sub__(self, other: "Point2D[Space]") -> Vector2D[Space]: ...

    @overload
    def __sub__(self, other: Vector2D[Space]) -> "Point2D[Space]": ...

    def __sub__(
        self, other: Union["Point2D[Space]", Vector2D[Space]]
    ) -> Union[Vector2D[Space], "Point2D[Space]"]:
        if isinstance(other, Vector2D):
            return Point2D(self.x - other.x, self.y - other.y)
        return Vector2D(self.x - other.x, self.y - other.y)

    def distance_to(self, other: "Point2D[Space]") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def approximate(self, tolerance: float) -> Iterator["Point2D[Space]"]:
        """A point is its own approximation, whatever the tolerance."""
        return iter((self,))

    def __str__(self):
        return f"Point2D(x={self.x}, y={self.y})"
