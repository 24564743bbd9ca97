"""Unit tests for the scene manager and preset scenes.

Tests cover:
- Material registration and validation
- Sphere management with material ids
- Building the hittable aggregate
- Configuration and JSON serialization
- Preset scene factories
"""

import json

import pytest

from raytrace.camera.pinhole import PinholeCamera, get_camera_info, setup_camera
from raytrace.core.ray import Ray
from raytrace.core.renderer import render
from raytrace.core.vector import Vector3
from raytrace.geometry.hittable_list import HittableList
from raytrace.materials.standard import StandardMaterial
from raytrace.scene.manager import MaterialType, SceneConfig, SceneManager
from raytrace.scene.presets import DefaultSceneParams, create_default_scene, create_legacy_scene


@pytest.fixture
def fresh_scene():
    """Provide a fresh SceneManager for each test."""
    return SceneManager()


class TestMaterialManagement:
    """Tests for material registration."""

    def test_add_standard_material(self, fresh_scene):
        mat_id = fresh_scene.add_standard_material((0.8, 0.3, 0.3), reflectivity=0.2, albedo=0.5)
        assert mat_id == 0
        info = fresh_scene.get_material_info(mat_id)
        assert info.material_type == MaterialType.STANDARD
        assert info.material.reflectivity == 0.2
        assert info.material.base_color == Vector3(0.8, 0.3, 0.3)

    def test_add_multiple_materials(self, fresh_scene):
        ids = [fresh_scene.add_standard_material((0.1 * i, 0.0, 0.0)) for i in range(4)]
        assert ids == [0, 1, 2, 3]
        assert fresh_scene.get_material_count() == 4

    def test_add_material_instance(self, fresh_scene):
        material = StandardMaterial.mirror((0.9, 0.9, 0.9))
        mat_id = fresh_scene.add_material(material)
        assert fresh_scene.get_material_info(mat_id).material is material

    def test_material_validation(self, fresh_scene):
        with pytest.raises(ValueError):
            fresh_scene.add_standard_material((0.5, 0.5, 0.5), reflectivity=1.5)
        with pytest.raises(ValueError):
            fresh_scene.add_standard_material((1.5, 0.5, 0.5))

    def test_get_material_info_unknown(self, fresh_scene):
        assert fresh_scene.get_material_info(0) is None
        assert fresh_scene.get_material_info(-1) is None


class TestSphereManagement:
    """Tests for adding spheres."""

    def test_add_sphere_with_material(self, fresh_scene):
        mat_id = fresh_scene.add_standard_material((0.5, 0.5, 0.5))
        index = fresh_scene.add_sphere((0, 0, -1), 0.5, mat_id)
        assert index == 0
        assert fresh_scene.spheres[0].center == (0.0, 0.0, -1.0)
        assert fresh_scene.spheres[0].material_id == mat_id

    def test_add_sphere_invalid_material(self, fresh_scene):
        with pytest.raises(ValueError, match="material_id"):
            fresh_scene.add_sphere((0, 0, 0), 1.0, 0)

    def test_add_sphere_invalid_radius(self, fresh_scene):
        mat_id = fresh_scene.add_standard_material((0.5, 0.5, 0.5))
        with pytest.raises(ValueError, match="radius"):
            fresh_scene.add_sphere((0, 0, 0), 0.0, mat_id)

    def test_add_sphere_invalid_center(self, fresh_scene):
        mat_id = fresh_scene.add_standard_material((0.5, 0.5, 0.5))
        with pytest.raises(ValueError, match="center"):
            fresh_scene.add_sphere((0, 0), 1.0, mat_id)

    def test_add_standard_sphere(self, fresh_scene):
        sphere_index, mat_id = fresh_scene.add_standard_sphere((1, 0, -1), 0.5, (0.8, 0.6, 0.2), 0.7)
        assert (sphere_index, mat_id) == (0, 0)
        assert fresh_scene.get_sphere_count() == 1
        assert fresh_scene.materials[mat_id].material.reflectivity == 0.7

    def test_clear_scene(self, fresh_scene):
        fresh_scene.add_standard_sphere((0, 0, -1), 0.5, (0.5, 0.5, 0.5))
        fresh_scene.set_camera(PinholeCamera())
        fresh_scene.clear()
        assert fresh_scene.get_sphere_count() == 0
        assert fresh_scene.get_material_count() == 0
        assert fresh_scene.camera is None


class TestBuild:
    """Tests for building the hittable aggregate."""

    def test_build_creates_spheres(self, fresh_scene):
        mat_id = fresh_scene.add_standard_material((0.5, 0.5, 0.5))
        fresh_scene.add_sphere((0, 0, -1), 0.5, mat_id)
        fresh_scene.add_sphere((0, -100.5, -1), 100.0, mat_id)

        world = fresh_scene.build()

        assert isinstance(world, HittableList)
        assert len(world) == 2
        record = world.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)))
        assert record.t == pytest.approx(0.5)

    def test_spheres_get_own_material_copies(self, fresh_scene):
        mat_id = fresh_scene.add_standard_material((0.5, 0.5, 0.5))
        fresh_scene.add_sphere((0, 0, -1), 0.5, mat_id)
        fresh_scene.add_sphere((1, 0, -1), 0.5, mat_id)

        first, second = fresh_scene.build()

        registered = fresh_scene.materials[mat_id].material
        assert first.material == registered
        assert first.material is not registered
        assert first.material is not second.material

    def test_built_spheres_and_materials_hash(self):
        """Built spheres are distinct set members; their material copies collapse by value."""
        scene, _ = create_default_scene()
        world = scene.build()

        assert len(set(world)) == 4
        materials = {sphere.material for sphere in world}
        assert materials == {info.material for info in scene.materials}


class TestSerialization:
    """Tests for scene configuration round trips."""

    def test_to_config(self, fresh_scene):
        fresh_scene.add_standard_sphere((0, 0, -1), 0.5, (0.8, 0.3, 0.3), 0.25, 0.5)
        config = fresh_scene.to_config()

        assert config.materials == [
            {"type": "standard", "reflectivity": 0.25, "base_color": [0.8, 0.3, 0.3], "albedo": 0.5}
        ]
        assert config.spheres == [{"center": [0.0, 0.0, -1.0], "radius": 0.5, "material_id": 0}]
        assert config.camera is None

    def test_from_config(self, fresh_scene):
        config = SceneConfig(
            materials=[{"type": "standard", "base_color": [0.2, 0.4, 0.6], "reflectivity": 1.0}],
            spheres=[{"center": [1, 2, 3], "radius": 2, "material_id": 0}],
            camera={"vertical_fov": 30.0},
        )
        fresh_scene.from_config(config)

        assert fresh_scene.get_material_count() == 1
        assert fresh_scene.materials[0].material.reflectivity == 1.0
        assert fresh_scene.materials[0].material.albedo == 1.0
        assert fresh_scene.spheres[0].center == (1.0, 2.0, 3.0)
        assert fresh_scene.camera == PinholeCamera(vertical_fov=30.0)

    def test_to_dict_from_dict(self):
        scene, _ = create_default_scene()
        data = scene.to_dict()

        restored = SceneManager()
        restored.from_dict(data)

        assert restored.to_dict() == data
        assert restored.camera == scene.camera

    def test_from_config_invalid_material_type(self, fresh_scene):
        config = SceneConfig(materials=[{"type": "glass"}])
        with pytest.raises(ValueError, match="Unknown material type"):
            fresh_scene.from_config(config)

    def test_from_config_invalid_material_id(self, fresh_scene):
        config = SceneConfig(
            materials=[{"type": "standard"}],
            spheres=[{"center": [0, 0, 0], "radius": 1.0, "material_id": 3}],
        )
        with pytest.raises(ValueError, match="material_id"):
            fresh_scene.from_config(config)

    @pytest.mark.parametrize(
        "config",
        [
            SceneConfig(materials=[{"type": "standard"}, {"type": "glass"}]),
            SceneConfig(
                materials=[{"type": "standard"}],
                spheres=[
                    {"center": [0, 0, 0], "radius": 1.0, "material_id": 0},
                    {"center": [0, 0, 0], "radius": 1.0, "material_id": 3},
                ],
            ),
            SceneConfig(materials=[{"type": "standard"}], camera={"vertical_fov": 120.0}),
        ],
    )
    def test_failed_from_config_keeps_previous_scene(self, config):
        """A configuration rejected part way through does not touch the loaded scene."""
        scene, camera = create_default_scene()
        before = scene.to_dict()

        with pytest.raises(ValueError):
            scene.from_config(config)

        assert scene.get_material_count() == 4
        assert scene.get_sphere_count() == 4
        assert scene.camera == camera
        assert scene.to_dict() == before

    def test_save_and_load(self, tmp_path):
        scene, camera = create_default_scene()
        path = tmp_path / "scene.json"
        scene.save(path)

        assert json.loads(path.read_text(encoding="utf-8"))["camera"] == camera.to_dict()

        loaded = SceneManager.load(path)
        assert loaded.to_dict() == scene.to_dict()
        assert loaded.camera == camera

    def test_load_rejects_non_object(self, tmp_path):
        path = tmp_path / "scene.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with pytest.raises(ValueError, match="JSON object"):
            SceneManager.load(path)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            SceneManager.load(tmp_path / "missing.json")


class TestPresets:
    """Tests for the preset scene factories."""

    def test_default_scene(self):
        scene, camera = create_default_scene()
        assert scene.get_sphere_count() == 4
        assert scene.camera is camera
        reflectivities = [info.material.reflectivity for info in scene.materials]
        assert reflectivities == [0.0, 0.0, 1.0, 0.7]

    def test_default_scene_params(self):
        params = DefaultSceneParams(vertical_fov=30.0, aspect_ratio=1.0, albedo=1.0)
        scene, camera = create_default_scene(params)
        assert camera.vertical_fov == 30.0
        assert camera.aspect_ratio == 1.0
        assert all(info.material.albedo == 1.0 for info in scene.materials)

    def test_legacy_scene(self):
        scene, camera = create_legacy_scene()
        assert scene.get_sphere_count() == 1
        assert scene.spheres[0].center == (0.0, 0.0, -1.0)
        assert scene.spheres[0].radius == 0.5
        assert get_camera_info(camera) == {
            "origin": (0.0, 0.0, 0.0),
            "lower_left": (-2.0, -1.0, -1.0),
            "horizontal": (4.0, 0.0, 0.0),
            "vertical": (0.0, 2.0, 0.0),
        }

    def test_default_scene_renders(self):
        scene, camera_config = create_default_scene()
        image = render(scene.build(), setup_camera(camera_config), 8, 2, seed=1)
        assert (image.width, image.height) == (8, 4)
        assert all(pixel.is_finite() for pixel in image.pixels)
