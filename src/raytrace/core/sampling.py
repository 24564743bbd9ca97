"""Random sampling utilities for Monte Carlo scattering.

All functions draw from an explicitly passed generator rather than global
state, so renders are reproducible when the generator is seeded. Any object
with a ``random()`` method returning floats in [0, 1) works;
``numpy.random.default_rng(seed)`` is the usual choice.
"""

from typing import Protocol

import numpy as np

from raytrace.core.vector import Vector3

# Upper bound on rejection-sampling draws. A uniform generator accepts a
# candidate with probability pi/6, so this is never reached in practice.
MAX_REJECTION_ATTEMPTS = 1000


class UniformSource(Protocol):
    """Minimal interface of a uniform [0, 1) random source."""

    def random(self) -> float: ...


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create the default random generator, seeded when ``seed`` is given."""
    return np.random.default_rng(seed)


def random_in_unit_sphere(rng: UniformSource) -> Vector3:
    """Generate a random point inside the unit sphere.

    Uses rejection sampling: points are drawn uniformly from the cube
    [-1, 1]^3 until one with length <= 1 is found. The result is not
    normalized.

    If ``MAX_REJECTION_ATTEMPTS`` draws are all rejected (only possible with
    a degenerate generator) the zero vector is returned.

    Args:
        rng: Uniform random source.

    Returns:
        A random point with length <= 1.
    """
    for _ in range(MAX_REJECTION_ATTEMPTS):
        p = Vector3(
            2.0 * float(rng.random()) - 1.0,
            2.0 * float(rng.random()) - 1.0,
            2.0 * float(rng.random()) - 1.0,
        )
        if p.length_squared() <= 1.0:
            return p
    return Vector3(0.0, 0.0, 0.0)
