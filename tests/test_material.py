"""Unit tests for StandardMaterial.

Tests cover:
- Parameter validation and convenience constructors
- Mirror, diffuse and blended scattering directions
- Componentwise attenuation
"""

import pytest

from raytrace.core.ray import Ray
from raytrace.core.vector import Vector3
from raytrace.geometry.hittable import HitRecord
from raytrace.materials.standard import StandardMaterial


def make_hit(material, normal=Vector3(0.0, 1.0, 0.0)):
    return HitRecord(t=1.0, point=Vector3(0.0, 0.0, 0.0), normal=normal, material=material)


class TestStandardMaterialParameters:
    """Tests for construction and validation."""

    def test_defaults(self):
        material = StandardMaterial()
        assert material.reflectivity == 0.0
        assert material.base_color == Vector3(0.5, 0.5, 0.5)
        assert material.albedo == 1.0

    def test_diffuse_and_mirror_constructors(self):
        assert StandardMaterial.diffuse((0.2, 0.3, 0.4)).reflectivity == 0.0
        mirror = StandardMaterial.mirror((0.8, 0.8, 0.8), albedo=0.5)
        assert mirror.reflectivity == 1.0
        assert mirror.albedo == 0.5
        assert mirror.base_color == Vector3(0.8, 0.8, 0.8)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"reflectivity": -0.1},
            {"reflectivity": 1.5},
            {"albedo": 2.0},
            {"base_color": Vector3(1.2, 0.5, 0.5)},
            {"base_color": Vector3(0.5, -0.1, 0.5)},
        ],
    )
    def test_out_of_range_rejected(self, kwargs):
        with pytest.raises(ValueError):
            StandardMaterial(**kwargs)

    def test_base_color_is_private_copy(self):
        color = Vector3(0.5, 0.5, 0.5)
        material = StandardMaterial(base_color=color)
        color *= 0.0
        assert material.base_color == Vector3(0.5, 0.5, 0.5)

    def test_to_params(self):
        params = StandardMaterial(0.25, Vector3(0.1, 0.2, 0.3), 0.5).to_params()
        assert params == {"reflectivity": 0.25, "base_color": [0.1, 0.2, 0.3], "albedo": 0.5}

    def test_equal_materials_hash_equal(self):
        a = StandardMaterial(0.25, Vector3(0.1, 0.2, 0.3), 0.5)
        b = StandardMaterial(0.25, (0.1, 0.2, 0.3), 0.5)
        assert a == b
        assert hash(a) == hash(b)

    def test_materials_in_a_set(self):
        materials = {
            StandardMaterial.diffuse((0.2, 0.3, 0.4)),
            StandardMaterial.diffuse((0.2, 0.3, 0.4)),
            StandardMaterial.mirror((0.2, 0.3, 0.4)),
        }
        assert len(materials) == 2



class TestStandardMaterialScatter:
    """Tests for scattering directions."""

    def test_mirror_reflects_exactly(self, rng):
        material = StandardMaterial.mirror((1.0, 1.0, 1.0))
        ray_in = Ray(Vector3(-1.0, 1.0, 0.0), Vector3(1.0, -1.0, 0.0))
        scattered = material.scatter(ray_in, make_hit(material), rng)

        assert scattered.origin == Vector3(0.0, 0.0, 0.0)
        assert scattered.direction.x == pytest.approx(2.0**-0.5)
        assert scattered.direction.y == pytest.approx(2.0**-0.5)
        assert scattered.direction.z == pytest.approx(0.0)

    def test_diffuse_scatters_into_normal_hemisphere(self, rng):
        material = StandardMaterial.diffuse((0.5, 0.5, 0.5))
        ray_in = Ray(Vector3(0.0, 1.0, 0.0), Vector3(0.0, -1.0, 0.0))
        for _ in range(200):
            scattered = material.scatter(ray_in, make_hit(material), rng)
            assert scattered.direction.length() == pytest.approx(1.0)
            assert scattered.direction.y >= 0.0

    def test_diffuse_uses_unit_sphere_offset(self, scripted_rng):
        """The diffuse target is the normal plus the sampled offset."""
        material = StandardMaterial.diffuse((0.5, 0.5, 0.5))
        # Every component of the sample is 2 * 0.75 - 1 = 0.5
        source = scripted_rng([0.75])
        ray_in = Ray(Vector3(0.0, 1.0, 0.0), Vector3(0.0, -1.0, 0.0))
        scattered = material.scatter(ray_in, make_hit(material), source)

        expected = Vector3(0.5, 1.5, 0.5).normalized()
        assert scattered.direction.x == pytest.approx(expected.x)
        assert scattered.direction.y == pytest.approx(expected.y)
        assert scattered.direction.z == pytest.approx(expected.z)

    def test_blend_interpolates(self, scripted_rng):
        material = StandardMaterial(reflectivity=0.5, base_color=Vector3(0.5, 0.5, 0.5))
        source = scripted_rng([0.5])  # zero offset
        ray_in = Ray(Vector3(-1.0, 1.0, 0.0), Vector3(1.0, -1.0, 0.0))
        scattered = material.scatter(ray_in, make_hit(material), source)

        # 0.5 * (1, 1, 0) + 0.5 * (0, 1, 0) = (0.5, 1, 0)
        expected = Vector3(0.5, 1.0, 0.0).normalized()
        assert scattered.direction.x == pytest.approx(expected.x)
        assert scattered.direction.y == pytest.approx(expected.y)


class TestStandardMaterialAttenuate:
    """Tests for colour attenuation."""

    def test_componentwise(self):
        material = StandardMaterial(base_color=Vector3(0.5, 0.25, 1.0), albedo=0.5)
        assert material.attenuate(Vector3(1.0, 1.0, 0.5)) == Vector3(0.25, 0.125, 0.25)

    def test_black_stays_black(self):
        material = StandardMaterial.diffuse((0.8, 0.8, 0.8))
        assert material.attenuate(Vector3(0.0, 0.0, 0.0)) == Vector3(0.0, 0.0, 0.0)
