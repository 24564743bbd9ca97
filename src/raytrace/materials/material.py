"""Base material interface.

A material decides how a ray continues after hitting a surface (``scatter``)
and how much of the light arriving along that continuation reaches the
viewer (``attenuate``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from raytrace.core.ray import Ray
    from raytrace.core.sampling import UniformSource
    from raytrace.core.vector import Vector3
    from raytrace.geometry.hittable import HitRecord


class Material(ABC):
    """Scattering behaviour attached to a primitive."""

    @abstractmethod
    def scatter(self, ray_in: Ray, hit: HitRecord, rng: UniformSource) -> Ray:
        """Produce the outgoing ray for an incoming ray at a hit point.

        Args:
            ray_in: The incoming ray.
            hit: The intersection being shaded.
            rng: Uniform random source for stochastic scattering.

        Returns:
            The scattered ray, originating at ``hit.point``.
        """

    @abstractmethod
    def attenuate(self, incoming_color: Vector3) -> Vector3:
        """Scale the colour carried back along the scattered ray."""
