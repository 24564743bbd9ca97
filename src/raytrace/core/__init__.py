"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    vector: Three-component vector for points, directions and colours
    ray: Ray data structure and reflection
    sampling: Random generator helpers and unit-sphere sampling
    integrator: Colour integrators (path tracing, normal visualisation)
    image: Image buffer and plain-text PPM serialization
    renderer: Per-pixel render loop with anti-aliasing
"""

from .ray import Ray, reflect
from .sampling import MAX_REJECTION_ATTEMPTS, make_rng, random_in_unit_sphere
from .vector import Vector3

# Note: integrator, image and renderer are NOT imported here to avoid circular
# imports (the renderer depends on the camera, which depends on this package).
# Import directly from raytrace.core.renderer when needed.

__all__ = [
    "Vector3",
    "Ray",
    "reflect",
    "make_rng",
    "random_in_unit_sphere",
    "MAX_REJECTION_ATTEMPTS",
]
