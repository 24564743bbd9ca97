"""Three-component vector type used for points, directions and colours.

All arithmetic operators return new instances. The augmented assignment
operators (``+=``, ``-=``, ``*=``, ``/=``) update the left-hand vector in
place, which the render loop uses for its running averages.

Example:
    >>> from raytrace.core.vector import Vector3
    >>> a = Vector3(1.0, 2.0, 3.0)
    >>> b = Vector3(2.0, 2.0, 2.0)
    >>> a + b
    Vector3(3.0, 4.0, 5.0)
    >>> a.dot(b)
    12.0
    >>> Vector3(0.4, 1.6, 2.5).as_display_pixel()
    '0 2 2'
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator


class Vector3:
    """A 3D vector of floats.

    Multiplication and division accept either a scalar or another Vector3;
    with a Vector3 they act componentwise.

    Attributes:
        x: First component (red when used as a colour).
        y: Second component (green when used as a colour).
        z: Third component (blue when used as a colour).
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> Vector3:
        """Build a vector from any three-item iterable (tuple, list, array).

        Raises:
            ValueError: If the iterable does not hold exactly three values.
        """
        items = list(values)
        if len(items) != 3:
            raise ValueError(f"Expected 3 components, got {len(items)}")
        return cls(items[0], items[1], items[2])

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: float) -> Vector3:
        return Vector3(other * self.x, other * self.y, other * self.z)

    def __truediv__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)
        return Vector3(self.x / other, self.y / other, self.z / other)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iadd__(self, other: Vector3) -> Vector3:
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: Vector3) -> Vector3:
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            self.x *= other.x
            self.y *= other.y
            self.z *= other.z
        else:
            self.x *= other
            self.y *= other
            self.z *= other
        return self

    def __itruediv__(self, other: Vector3 | float) -> Vector3:
        if isinstance(other, Vector3):
            self.x /= other.x
            self.y /= other.y
            self.z /= other.z
        else:
            self.x /= other
            self.y /= other
            self.z /= other
        return self

    # =========================================================================
    # Geometry
    # =========================================================================

    def dot(self, other: Vector3) -> float:
        """Compute the dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Compute the cross product ``self x other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        """Squared Euclidean length; avoids the square root when comparing."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        """Euclidean length ``sqrt(x^2 + y^2 + z^2)``."""
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vector3:
        """Return a unit vector in the same direction.

        A zero-length vector is not guarded against: the division raises
        ``ZeroDivisionError``. Callers must not normalise zero directions.

        Returns:
            ``self / self.length()``.
        """
        return self / self.length()

    def is_finite(self) -> bool:
        """True if no component is NaN or infinite."""
        return math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)

    # =========================================================================
    # Conversion
    # =========================================================================

    def as_display_pixel(self) -> str:
        """Format the components as a PPM pixel line, e.g. ``"0 2 2"``.

        Each component is rendered with zero decimals by the float formatter,
        so exact binary halves such as 2.5 round to even (``"2"``).
        """
        return f"{self.x:.0f} {self.y:.0f} {self.z:.0f}"

    def to_tuple(self) -> tuple[float, float, float]:
        """Return the components as a plain tuple."""
        return (self.x, self.y, self.z)

    def copy(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    # Mutable through the in-place operators, so not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
