"""Ray data structure and reflection helper.

Example:
    >>> from raytrace.core.ray import Ray
    >>> from raytrace.core.vector import Vector3
    >>> ray = Ray(origin=Vector3(0.0, 0.0, 0.0), direction=Vector3(0.0, 0.0, -1.0))
    >>> ray.point_at(5.0)  # Point 5 units along the ray
    Vector3(0.0, 0.0, -5.0)
"""

from dataclasses import dataclass

from raytrace.core.vector import Vector3


@dataclass(frozen=True, eq=False)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. It is not normalized by
            construction and may have any non-zero length.
    """

    origin: Vector3
    direction: Vector3

    def point_at(self, t: float) -> Vector3:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point ``origin + direction * t``.
        """
        return self.origin + self.direction * t


def reflect(incident: Vector3, normal: Vector3) -> Vector3:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction vector (pointing toward the surface).
        normal: The surface normal (should be normalized).

    Returns:
        The reflected direction ``incident - 2 (incident . normal) normal``.
    """
    return incident - normal * (2.0 * incident.dot(normal))
