"""Scene manager for coordinating primitives and materials.

This module provides a high-level scene building API. Materials are
registered once and referenced by id when adding spheres; ``build`` turns
the description into the ``HittableList`` the renderer traces against.

The SceneManager maintains:
- A material_id space indexing the registered materials
- The spheres with the material id each one uses
- An optional camera configuration
- JSON-compatible serialization (``to_dict``/``from_dict``, ``save``/``load``)

Example:
    >>> from raytrace.scene.manager import SceneManager
    >>> scene = SceneManager()
    >>> mat_id = scene.add_standard_material(base_color=(0.8, 0.3, 0.3), albedo=0.5)
    >>> scene.add_sphere(center=(0, 0, -1), radius=0.5, material_id=mat_id)
    >>> world = scene.build()
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any

from raytrace.camera.pinhole import PinholeCamera
from raytrace.core.vector import Vector3
from raytrace.geometry.hittable_list import HittableList
from raytrace.geometry.sphere import Sphere
from raytrace.materials.standard import StandardMaterial


class MaterialType(str, Enum):
    """Enumeration of supported material types.

    The value is the ``type`` string used in scene configurations.
    """

    STANDARD = "standard"


@dataclass
class MaterialInfo:
    """Information about a registered material.

    Attributes:
        material_id: The material ID.
        material_type: The type of material.
        material: The material instance.
    """

    material_id: int
    material_type: MaterialType
    material: StandardMaterial


@dataclass
class SphereInfo:
    """Information about a sphere in the scene.

    Attributes:
        sphere_index: The index of the sphere in the scene.
        center: The center of the sphere.
        radius: The radius of the sphere.
        material_id: The material ID assigned to the sphere.
    """

    sphere_index: int
    center: tuple[float, float, float]
    radius: float
    material_id: int


@dataclass
class SceneConfig:
    """Configuration for scene serialization.

    Attributes:
        materials: List of material configurations.
        spheres: List of sphere configurations.
        camera: Optional camera configuration.
    """

    materials: list[dict[str, Any]] = field(default_factory=list)
    spheres: list[dict[str, Any]] = field(default_factory=list)
    camera: dict[str, Any] | None = None


def _as_triple(values: Any, name: str) -> tuple[float, float, float]:
    try:
        x, y, z = values
        return (float(x), float(y), float(z))
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be a list of 3 numbers, got {values!r}") from e


class SceneManager:
    """Scene builder coordinating spheres and their materials.

    Attributes:
        materials: List of MaterialInfo for all registered materials.
        spheres: List of SphereInfo for all spheres in the scene.
        camera: Camera configuration stored with the scene, if any.

    Example:
        >>> scene = SceneManager()
        >>> # Add materials
        >>> red_diffuse = scene.add_standard_material(base_color=(0.8, 0.1, 0.1))
        >>> gold_metal = scene.add_standard_material(
        ...     reflectivity=0.8, base_color=(0.8, 0.6, 0.2)
        ... )
        >>> # Add objects with materials
        >>> scene.add_sphere((0, 0, -1), 0.5, red_diffuse)
        >>> scene.add_sphere((1, 0, -1), 0.5, gold_metal)
    """

    def __init__(self) -> None:
        """Initialize an empty scene."""
        self.materials: list[MaterialInfo] = []
        self.spheres: list[SphereInfo] = []
        self.camera: PinholeCamera | None = None

    def clear(self) -> None:
        """Clear the entire scene (primitives, materials and camera)."""
        self.materials.clear()
        self.spheres.clear()
        self.camera = None

    # =========================================================================
    # Material Management
    # =========================================================================

    def add_material(self, material: StandardMaterial) -> int:
        """Register an existing material instance.

        Returns:
            The material ID for this material.
        """
        material_id = len(self.materials)
        self.materials.append(
            MaterialInfo(
                material_id=material_id,
                material_type=MaterialType.STANDARD,
                material=material,
            )
        )
        return material_id

    def add_standard_material(
        self,
        base_color: tuple[float, float, float],
        reflectivity: float = 0.0,
        albedo: float = 1.0,
    ) -> int:
        """Add a standard (diffuse/mirror blend) material to the scene.

        Args:
            base_color: The surface colour as (R, G, B), each in [0, 1].
            reflectivity: Mirror weight in [0, 1]. Default is 0 (diffuse).
            albedo: Fraction of light reflected, in [0, 1].

        Returns:
            The material ID for this material.

        Raises:
            ValueError: If any parameter is outside [0, 1].
        """
        material = StandardMaterial(
            reflectivity=reflectivity,
            base_color=Vector3.from_iterable(base_color),
            albedo=albedo,
        )
        return self.add_material(material)

    def get_material_count(self) -> int:
        """Get the total number of materials in the scene."""
        return len(self.materials)

    def get_material_info(self, material_id: int) -> MaterialInfo | None:
        """Get information about a material by ID, or None if not found."""
        if 0 <= material_id < len(self.materials):
            return self.materials[material_id]
        return None

    # =========================================================================
    # Primitive Management
    # =========================================================================

    def add_sphere(
        self,
        center: tuple[float, float, float],
        radius: float,
        material_id: int,
    ) -> int:
        """Add a sphere to the scene.

        Args:
            center: The center point of the sphere as (x, y, z).
            radius: The radius of the sphere (must be positive).
            material_id: The material ID to assign to the sphere.

        Returns:
            The index of the added sphere.

        Raises:
            ValueError: If material_id is invalid or radius is not positive.
        """
        if material_id < 0 or material_id >= len(self.materials):
            raise ValueError(f"Invalid material_id: {material_id}")
        if not radius > 0.0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")

        sphere_index = len(self.spheres)
        self.spheres.append(
            SphereInfo(
                sphere_index=sphere_index,
                center=_as_triple(center, "center"),
                radius=float(radius),
                material_id=material_id,
            )
        )
        return sphere_index

    def add_standard_sphere(
        self,
        center: tuple[float, float, float],
        radius: float,
        base_color: tuple[float, float, float],
        reflectivity: float = 0.0,
        albedo: float = 1.0,
    ) -> tuple[int, int]:
        """Add a sphere with a new standard material.

        Convenience method that creates a material and sphere in one call.

        Returns:
            Tuple of (sphere_index, material_id).
        """
        material_id = self.add_standard_material(base_color, reflectivity, albedo)
        sphere_index = self.add_sphere(center, radius, material_id)
        return sphere_index, material_id

    def get_sphere_count(self) -> int:
        """Get the number of spheres in the scene."""
        return len(self.spheres)

    def set_camera(self, camera: PinholeCamera) -> None:
        """Store a camera configuration with the scene."""
        self.camera = camera

    # =========================================================================
    # Scene Construction
    # =========================================================================

    def build(self) -> HittableList:
        """Create the hittable aggregate for rendering.

        Each sphere receives its own copy of its material's parameters.

        Returns:
            A HittableList with one Sphere per registered sphere, in order.
        """
        world = HittableList()
        for info in self.spheres:
            material = replace(self.materials[info.material_id].material)
            world.add(
                Sphere(
                    center=Vector3.from_iterable(info.center),
                    radius=info.radius,
                    material=material,
                )
            )
        return world

    # =========================================================================
    # Scene Serialization
    # =========================================================================

    def to_config(self) -> SceneConfig:
        """Export the scene to a configuration object."""
        config = SceneConfig()

        for mat in self.materials:
            config.materials.append({"type": mat.material_type.value, **mat.material.to_params()})

        for sphere in self.spheres:
            config.spheres.append(
                {
                    "center": list(sphere.center),
                    "radius": sphere.radius,
                    "material_id": sphere.material_id,
                }
            )

        if self.camera is not None:
            config.camera = self.camera.to_dict()

        return config

    def from_config(self, config: SceneConfig) -> None:
        """Load a scene from a configuration object.

        Replaces the current scene with the configuration. The new scene is
        built on a separate manager first, so an invalid configuration leaves
        this one unchanged.

        Args:
            config: The scene configuration to load.

        Raises:
            ValueError: If the configuration contains invalid data.
        """
        staged = type(self)()

        # Load materials first (needed for primitives)
        for mat_config in config.materials:
            mat_type = str(mat_config.get("type", "")).lower()
            if mat_type != MaterialType.STANDARD.value:
                raise ValueError(f"Unknown material type: {mat_type}")
            staged.add_standard_material(
                base_color=_as_triple(mat_config.get("base_color", [0.5, 0.5, 0.5]), "base_color"),
                reflectivity=float(mat_config.get("reflectivity", 0.0)),
                albedo=float(mat_config.get("albedo", 1.0)),
            )

        for sphere_config in config.spheres:
            staged.add_sphere(
                center=_as_triple(sphere_config.get("center", [0, 0, 0]), "center"),
                radius=float(sphere_config.get("radius", 1.0)),
                material_id=int(sphere_config.get("material_id", 0)),
            )

        if config.camera is not None:
            staged.camera = PinholeCamera.from_dict(config.camera)

        self.materials = staged.materials
        self.spheres = staged.spheres
        self.camera = staged.camera

    def to_dict(self) -> dict[str, Any]:
        """Export the scene to a dictionary (for JSON serialization)."""
        config = self.to_config()
        data: dict[str, Any] = {
            "materials": config.materials,
            "spheres": config.spheres,
        }
        if config.camera is not None:
            data["camera"] = config.camera
        return data

    def from_dict(self, data: dict[str, Any]) -> None:
        """Load a scene from a dictionary.

        Args:
            data: Dictionary with 'materials', 'spheres' and optional
                'camera' keys.
        """
        config = SceneConfig(
            materials=data.get("materials", []),
            spheres=data.get("spheres", []),
            camera=data.get("camera"),
        )
        self.from_config(config)

    def save(self, filepath: str | Path) -> None:
        """Write the scene description to a JSON file."""
        Path(filepath).write_text(json.dumps(self.to_dict(), indent=2) + "\n", encoding="utf-8")

    @classmethod
    def load(cls, filepath: str | Path) -> SceneManager:
        """Read a scene description from a JSON file.

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the file is not valid JSON or describes an
                invalid scene.
        """
        data = json.loads(Path(filepath).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Scene file {filepath} must contain a JSON object")
        scene = cls()
        scene.from_dict(data)
        return scene
