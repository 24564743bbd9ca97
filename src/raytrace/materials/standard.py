"""Standard material blending mirror reflection with diffuse scattering.

The scattered direction is a linear interpolation between the perfect mirror
direction and a Lambertian-style diffuse direction, weighted by
``reflectivity``:

    reflected = d - 2 (d . n) n
    diffuse_target = n + random_in_unit_sphere()
    scattered = normalize(r * reflected + (1 - r) * diffuse_target)

The colour returned along the scattered ray is attenuated componentwise:

    attenuate(c) = albedo * base_color * c

A reflectivity of 0 gives a purely diffuse surface, 1 a perfect mirror.

Example:
    >>> from raytrace.materials.standard import StandardMaterial
    >>> matte = StandardMaterial.diffuse((0.8, 0.3, 0.3), albedo=0.5)
    >>> chrome = StandardMaterial.mirror((0.8, 0.8, 0.8))
    >>> brushed = StandardMaterial(reflectivity=0.7, base_color=Vector3(0.8, 0.6, 0.2))
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from raytrace.core.ray import Ray, reflect
from raytrace.core.sampling import UniformSource, random_in_unit_sphere
from raytrace.core.vector import Vector3
from raytrace.materials.material import Material

if TYPE_CHECKING:
    from raytrace.geometry.hittable import HitRecord


def _check_unit_interval(name: str, value: float) -> None:
    if value < 0.0 or value > 1.0:
        raise ValueError(f"{name} = {value} is outside [0, 1]")


@dataclass(frozen=True)
class StandardMaterial(Material):
    """Diffuse/mirror blend material.

    Attributes:
        reflectivity: Weight of the mirror direction in [0, 1].
        base_color: Surface colour (RGB, each component in [0, 1]).
        albedo: Fraction of light reflected, in [0, 1].
    """

    reflectivity: float = 0.0
    base_color: Vector3 = field(default_factory=lambda: Vector3(0.5, 0.5, 0.5))
    albedo: float = 1.0

    def __post_init__(self) -> None:
        # Own a private copy so callers cannot mutate it in place later
        object.__setattr__(self, "base_color", Vector3.from_iterable(self.base_color))
        _check_unit_interval("reflectivity", self.reflectivity)
        _check_unit_interval("albedo", self.albedo)
        for i, component in enumerate(self.base_color):
            if component < 0.0 or component > 1.0:
                raise ValueError(
                    f"base_color component {i} = {component} is outside [0, 1]. "
                    "This would violate energy conservation."
                )

    def __hash__(self) -> int:
        # Vector3 is mutable and unhashable, so hash its components instead
        return hash((self.reflectivity, self.base_color.to_tuple(), self.albedo))

    @classmethod
    def diffuse(cls, base_color: Iterable[float], albedo: float = 1.0) -> StandardMaterial:
        """Create a purely diffuse material (reflectivity 0)."""
        return cls(reflectivity=0.0, base_color=base_color, albedo=albedo)

    @classmethod
    def mirror(cls, base_color: Iterable[float], albedo: float = 1.0) -> StandardMaterial:
        """Create a perfect mirror material (reflectivity 1)."""
        return cls(reflectivity=1.0, base_color=base_color, albedo=albedo)

    def scatter(self, ray_in: Ray, hit: HitRecord, rng: UniformSource) -> Ray:
        """Blend the mirror and diffuse directions by reflectivity.

        Args:
            ray_in: The incoming ray.
            hit: The intersection being shaded.
            rng: Uniform random source for the diffuse component.

        Returns:
            A ray from ``hit.point`` along the normalized blended direction.
        """
        reflected = reflect(ray_in.direction, hit.normal)
        diffuse_target = hit.normal + random_in_unit_sphere(rng)
        direction = (
            reflected * self.reflectivity + diffuse_target * (1.0 - self.reflectivity)
        ).normalized()
        return Ray(origin=hit.point, direction=direction)

    def attenuate(self, incoming_color: Vector3) -> Vector3:
        """Return ``albedo * base_color * incoming_color`` (componentwise)."""
        return self.base_color * incoming_color * self.albedo

    def to_params(self) -> dict[str, Any]:
        """Export the parameters as JSON-compatible values."""
        return {
            "reflectivity": self.reflectivity,
            "base_color": list(self.base_color.to_tuple()),
            "albedo": self.albedo,
        }
