"""Pytest configuration for raytrace tests.

This module provides shared fixtures for all test modules: seeded random
generators, a scripted generator for exact sampling tests and small scenes.
"""

import itertools

import numpy as np
import pytest

from raytrace.core.vector import Vector3
from raytrace.geometry.hittable_list import HittableList
from raytrace.geometry.sphere import Sphere
from raytrace.materials.standard import StandardMaterial


class ScriptedRandom:
    """Random source replaying a fixed sequence of values in a loop.

    Stands in for ``numpy.random.Generator`` where a test needs to know
    exactly which numbers are drawn.
    """

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0
        self._cycle = itertools.cycle(self.values)

    def random(self):
        self.calls += 1
        return next(self._cycle)


@pytest.fixture
def rng():
    """A seeded numpy generator."""
    return np.random.default_rng(42)


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRandom sources."""
    return ScriptedRandom


@pytest.fixture
def gray_diffuse():
    return StandardMaterial.diffuse((0.5, 0.5, 0.5))


@pytest.fixture
def single_sphere_scene(gray_diffuse):
    """The legacy single sphere at (0, 0, -1) with radius 0.5."""
    return HittableList([Sphere(Vector3(0.0, 0.0, -1.0), 0.5, gray_diffuse)])


@pytest.fixture
def empty_scene():
    return HittableList()
