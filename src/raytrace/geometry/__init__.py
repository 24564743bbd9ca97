"""Geometry module for shape primitives and scene aggregation.

Components:
    hittable: Hittable interface and hit record
    sphere: Sphere primitive with ray-sphere intersection
    hittable_list: Nearest-hit aggregate over many hittables

Ray-object intersection follows the pattern:
    record = obj.hit(ray, t_min, t_max)  # HitRecord or None
"""

from .hittable import HitRecord, Hittable
from .hittable_list import HittableList
from .sphere import Sphere

__all__ = [
    "Hittable",
    "HitRecord",
    "Sphere",
    "HittableList",
]
