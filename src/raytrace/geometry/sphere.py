"""Sphere primitive with ray-sphere intersection.

The ray-sphere intersection is found by solving:
    |ray_origin + t * ray_direction - center|^2 = radius^2

Expanding and rearranging gives the quadratic equation:
    a*t^2 + b*t + c = 0

where:
    a = dot(direction, direction)
    b = 2 * dot(oc, direction)
    c = dot(oc, oc) - radius^2
    oc = origin - center

Only the smaller root is considered. A ray leaving a sphere from inside has
its smaller root behind the origin and therefore does not hit.

Example:
    >>> from raytrace.core.ray import Ray
    >>> from raytrace.core.vector import Vector3
    >>> from raytrace.geometry.sphere import Sphere
    >>> from raytrace.materials.standard import StandardMaterial
    >>> sphere = Sphere(Vector3(0, 0, 0), 1.0, StandardMaterial.diffuse((0.5, 0.5, 0.5)))
    >>> record = sphere.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)))
    >>> record.t
    4.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from raytrace.core.ray import Ray
from raytrace.core.vector import Vector3
from raytrace.geometry.hittable import HitRecord, Hittable
from raytrace.materials.material import Material


@dataclass(frozen=True, eq=False)
class Sphere(Hittable):
    """A sphere defined by center point, radius and material.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive).
        material: The material used to shade hits on this sphere.
    """

    center: Vector3
    radius: float
    material: Material

    def __post_init__(self) -> None:
        if not self.radius > 0.0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")

    def hit(
        self,
        ray: Ray,
        t_min: float = 0.0,
        t_max: float = math.inf,
    ) -> HitRecord | None:
        """Test for ray-sphere intersection at the near root.

        Args:
            ray: The ray to test. Its direction need not be normalized.
            t_min: Minimum t value to consider a valid hit.
            t_max: Maximum t value to consider a valid hit.

        Returns:
            A HitRecord for the near intersection, or None if the ray misses
            or the near intersection lies outside [t_min, t_max].
        """
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2.0 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0.0:
            return None

        t = (-b - math.sqrt(discriminant)) / (2.0 * a)
        if t < t_min or t > t_max:
            return None

        point = ray.point_at(t)
        # Outward normal: unit length because |point - center| == radius
        normal = (point - self.center) / self.radius
        return HitRecord(t=t, point=point, normal=normal, material=self.material)
