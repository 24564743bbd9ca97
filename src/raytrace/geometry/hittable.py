"""Hittable interface and hit record structure.

Every object that a ray can intersect implements ``Hittable.hit``, which
returns a ``HitRecord`` for the nearest admissible intersection or ``None``
when the ray misses.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from raytrace.core.ray import Ray
    from raytrace.core.vector import Vector3
    from raytrace.materials.material import Material


@dataclass(frozen=True, eq=False)
class HitRecord:
    """Record of a ray-primitive intersection.

    Attributes:
        t: The parameter value along the ray where the intersection occurred.
        point: The 3D point where the ray intersected the surface.
        normal: The surface normal at the intersection point (unit length,
            pointing outward from the surface).
        material: The material of the primitive that was hit.
    """

    t: float
    point: Vector3
    normal: Vector3
    material: Material


class Hittable(ABC):
    """Base class for anything a ray can intersect."""

    @abstractmethod
    def hit(
        self,
        ray: Ray,
        t_min: float = 0.0,
        t_max: float = math.inf,
    ) -> HitRecord | None:
        """Intersect a ray with this object.

        Args:
            ray: The ray to test.
            t_min: Smallest accepted ray parameter. The default of 0 rejects
                intersections behind the ray origin.
            t_max: Largest accepted ray parameter.

        Returns:
            The hit record for the nearest accepted intersection, or None.
        """
