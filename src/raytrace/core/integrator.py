"""Colour integrators for tracing rays through a scene.

This module evaluates the colour seen along a ray. The main integrator follows
a ray through the scene, bouncing off surfaces according to their materials,
until it escapes into the sky.

Key features:
    - Material dispatch through ``Material.scatter`` / ``Material.attenuate``
    - Procedural sky gradient for escaped rays
    - Hard bounce limit returning black for paths that never escape
    - Surface-normal visualisation integrator for debugging scenes

Each bounce multiplies a running throughput by the hit material's
attenuation, so the loop computes the same value as the recursive form
``attenuate(ray_color(scattered))`` without growing the call stack.

Example:
    >>> from raytrace.core.integrator import PathIntegrator
    >>> from raytrace.core.sampling import make_rng
    >>> integrator = PathIntegrator(scene, make_rng(42), max_depth=50)
    >>> color = integrator.ray_color(camera.get_ray(0.5, 0.5))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from raytrace.core.vector import Vector3

if TYPE_CHECKING:
    from raytrace.core.ray import Ray
    from raytrace.core.sampling import UniformSource
    from raytrace.geometry.hittable import Hittable

# =============================================================================
# Rendering Constants
# =============================================================================

# Maximum ray bounces (path length)
MAX_DEPTH = 50

# Sky gradient endpoints: white looking straight down, blue straight up
SKY_WHITE = (1.0, 1.0, 1.0)
SKY_BLUE = (0.5, 0.7, 1.0)

# Colour of paths cut off by the bounce limit
BLACK = (0.0, 0.0, 0.0)


def scale_value_to_range(
    range_in_min: float,
    range_in_max: float,
    range_out_min: float,
    range_out_max: float,
    in_value: float,
) -> float:
    """Linearly map a value from one range onto another.

    Args:
        range_in_min: Input value mapped to ``range_out_min``.
        range_in_max: Input value mapped to ``range_out_max``.
        range_out_min: Lower end of the output range.
        range_out_max: Upper end of the output range.
        in_value: The value to map.

    Returns:
        The mapped value. Inputs outside the input range extrapolate.
    """
    range_in = range_in_max - range_in_min
    range_out = range_out_max - range_out_min
    scale = range_out / range_in
    post_scale_shift = range_out_min - range_in_min * scale
    return in_value * scale + post_scale_shift


def sky_color(direction: Vector3) -> Vector3:
    """Evaluate the background gradient for a ray direction.

    The vertical component of the normalized direction, in [-1, 1], is mapped
    to a blend factor t in [0, 1]; the result is
    ``(1 - t) * white + t * sky_blue``.

    Args:
        direction: Ray direction (any non-zero length).

    Returns:
        The sky colour seen along the direction.
    """
    t = scale_value_to_range(-1.0, 1.0, 0.0, 1.0, direction.normalized().y)
    return Vector3(*SKY_WHITE) * (1.0 - t) + Vector3(*SKY_BLUE) * t


class Integrator(Protocol):
    """Anything that turns a ray into a colour."""

    def ray_color(self, ray: Ray) -> Vector3: ...


class PathIntegrator:
    """Stochastic path tracer with material scattering.

    Attributes:
        scene: The hittable aggregate to trace against.
        rng: Uniform random source shared by all scattering events.
        max_depth: Maximum number of surface bounces per path.
    """

    def __init__(self, scene: Hittable, rng: UniformSource, max_depth: int = MAX_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self.scene = scene
        self.rng = rng
        self.max_depth = max_depth

    def ray_color(self, ray: Ray) -> Vector3:
        """Trace a single path and return its colour.

        Args:
            ray: The primary ray.

        Returns:
            The colour carried back along the ray: the sky colour reached by
            the path, attenuated by every surface it bounced off, or black if
            the path is still bouncing after ``max_depth`` hits.
        """
        throughput = Vector3(1.0, 1.0, 1.0)
        for _ in range(self.max_depth):
            hit = self.scene.hit(ray)
            if hit is None:
                return throughput * sky_color(ray.direction)
            ray = hit.material.scatter(ray, hit, self.rng)
            throughput = hit.material.attenuate(throughput)
        return Vector3(*BLACK)


class NormalIntegrator:
    """Visualise surface normals instead of tracing light.

    Hit points are shaded by mapping each normal component from [-1, 1] to
    [0, 1]; escaped rays show the sky. No scattering and no randomness.
    """

    def __init__(self, scene: Hittable) -> None:
        self.scene = scene

    def ray_color(self, ray: Ray) -> Vector3:
        hit = self.scene.hit(ray)
        if hit is None:
            return sky_color(ray.direction)
        n = hit.normal
        return Vector3(
            scale_value_to_range(-1.0, 1.0, 0.0, 1.0, n.x),
            scale_value_to_range(-1.0, 1.0, 0.0, 1.0, n.y),
            scale_value_to_range(-1.0, 1.0, 0.0, 1.0, n.z),
        )
