"""Scene-level aggregate that resolves the nearest hit among many objects."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

from raytrace.core.ray import Ray
from raytrace.geometry.hittable import HitRecord, Hittable


class HittableList(Hittable):
    """An ordered collection of hittables acting as a single hittable.

    Order only matters when two objects produce exactly the same ``t``, in
    which case the earlier one wins.

    Example:
        >>> scene = HittableList()
        >>> scene.add(Sphere(Vector3(0, 0, -1), 0.5, material))
        >>> record = scene.hit(ray)
    """

    def __init__(self, objects: Iterable[Hittable] = ()) -> None:
        self.objects: list[Hittable] = list(objects)

    def add(self, obj: Hittable) -> None:
        """Append an object to the scene."""
        self.objects.append(obj)

    def clear(self) -> None:
        """Remove all objects from the scene."""
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(
        self,
        ray: Ray,
        t_min: float = 0.0,
        t_max: float = math.inf,
    ) -> HitRecord | None:
        """Test ray against all objects and return the closest hit.

        Iterates through all objects, narrowing ``t_max`` to the closest hit
        found so far, so later objects only win when strictly nearer.

        Args:
            ray: The ray to test.
            t_min: Minimum t value to consider a valid hit.
            t_max: Maximum t value to consider a valid hit.

        Returns:
            The HitRecord of the closest intersection, or None if nothing
            was hit.
        """
        closest_t = t_max
        result = None
        for obj in self.objects:
            record = obj.hit(ray, t_min, closest_t)
            if record is not None and (result is None or record.t < closest_t):
                closest_t = record.t
                result = record
        return result
