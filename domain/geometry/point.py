# domain/geometry/point.py
from typing import List, Optional, TextIO
from pydantic import Field
import logging
import math
from domain.geometry.constants import EPSILON
from utils.base_model import ValueModel

logger = logging.getLogger(__name__)


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics: a zero denominator gives inf or nan."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _read_token(stream: TextIO) -> Optional[str]:
    """Read one whitespace-delimited token, or None if the stream is exhausted."""
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)
    chars: List[str] = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)
    return "".join(chars) or None


class Point(ValueModel):
    """
    Represents a 2D point (or vector) in Cartesian coordinates.

    Coordinates are unconstrained floats; infinities and NaN are accepted and
    propagate through the arithmetic instead of raising. Equality is
    approximate (absolute EPSILON per coordinate) while ordering is
    lexicographic on the exact x value, so the two are not consistent:
    points equal under == can still compare as < or >.
    """
    # Strict: numbers only, numeric strings go through parse()
    x: float = Field(default=0.0, strict=True, description="X coordinate")
    y: float = Field(default=0.0, strict=True, description="Y coordinate")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x=x, y=y)

    def __add__(self, other: "Point") -> "Point":
        """Vector addition of two points."""
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        """Vector subtraction of two points."""
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        """Scale the point coordinates by a factor."""
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    def __truediv__(self, divisor: float) -> "Point":
        """Divide the coordinates by a scalar; dividing by zero gives inf/nan."""
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return Point(_divide(self.x, divisor), _divide(self.y, divisor))

    def norm(self) -> float:
        """Euclidean magnitude of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> "Point":
        """
        Return the unit vector pointing in the same direction.

        The zero vector is not guarded against and yields NaN coordinates.
        """
        return self / self.norm()

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> float:
        """Signed 2D cross product (z component of the 3D cross product)."""
        return self.x * other.y - self.y * other.x

    def dist(self, p: "Point", q: Optional["Point"] = None) -> float:
        """
        Calculate a Euclidean distance from this point.

        Args:
            p: The other point, or the first point defining a line
            q: If given, the second point defining the line pq

        Returns:
            The distance to p when q is None, otherwise the perpendicular
            distance to the infinite line through p and q (inf or nan when
            p and q coincide)
        """
        if q is None:
            return (self - p).norm()
        return _divide(abs((p - q).cross(self - q)), (p - q).norm())

    def rotate(self, theta: float) -> "Point":
        """Rotate counter-clockwise about the origin by theta radians."""
        # math.cos/math.sin raise on infinities
        if math.isfinite(theta):
            cos_t, sin_t = math.cos(theta), math.sin(theta)
        else:
            cos_t = sin_t = math.nan
        return Point(self.x * cos_t - self.y * sin_t,
                     self.x * sin_t + self.y * cos_t)

    def project(self, p: "Point", q: "Point") -> "Point":
        """Orthogonal projection of this point onto the line through p and q."""
        direction = q - p
        t = _divide((self - p).dot(direction), direction.dot(direction))
        return p + direction * t

    def reflect(self, p: "Point", q: "Point") -> "Point":
        """Mirror image of this point across the line through p and q."""
        return self + (self.project(p, q) - self) * 2

    def midpoint(self, other: "Point") -> "Point":
        """Calculate the midpoint between this point and another point."""
        return (self + other) / 2

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return abs(self.x - other.x) < EPSILON and abs(self.y - other.y) < EPSILON

    # Ordering compares x exactly, not within EPSILON.
    def __lt__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x < other.x if self.x != other.x else self.y < other.y

    def __gt__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x > other.x if self.x != other.x else self.y > other.y

    def __le__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x < other.x if self.x != other.x else self.y <= other.y

    def format_as_tuple(self) -> str:
        """Format the point as a tuple string."""
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        """String representation of the point."""
        return self.format_as_tuple()

    def __format__(self, format_spec: str) -> str:
        """Apply format_spec to each coordinate, e.g. f"{p:.2f}" -> "(1.00, 2.00)"."""
        if not format_spec:
            return str(self)
        return f"({self.x:{format_spec}}, {self.y:{format_spec}})"

    @classmethod
    def parse(cls, text: str) -> "Point":
        """
        Parse a point from two whitespace-separated numbers, e.g. "3 4.5".

        Raises:
            ValueError: If text does not hold exactly two numbers
        """
        tokens = text.split()
        if len(tokens) != 2:
            logger.warning(f"Expected two coordinates, got {len(tokens)}: {text!r}")
            raise ValueError(f"Expected two coordinates, got {len(tokens)}: {text!r}")
        try:
            x, y = (float(token) for token in tokens)
        except ValueError as e:
            logger.warning(f"Malformed coordinates: {text!r}")
            raise ValueError(f"Malformed coordinates: {text!r}") from e
        return cls(x, y)

    @classmethod
    def read(cls, stream: TextIO) -> "Point":
        """
        Read the next point from a text stream.

        Consumes exactly the next two whitespace-separated tokens (which may
        span lines) plus the single whitespace character ending each one;
        everything after them stays in the stream for the next read.

        Raises:
            EOFError: If the stream ends before two tokens are read
            ValueError: If either token is not a number
        """
        tokens: List[str] = []
        while len(tokens) < 2:
            token = _read_token(stream)
            if token is None:
                raise EOFError(f"Stream ended after {len(tokens)} of 2 coordinates")
            tokens.append(token)
        return cls.parse(" ".join(tokens))
