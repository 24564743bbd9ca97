"""Preset scene configurations.

This module provides factory functions for the scenes rendered by the example
scripts:

- ``create_default_scene``: a diffuse sphere resting on a large ground
  sphere, flanked by a mirror sphere and a brushed-metal sphere, viewed by a
  derived pinhole camera.
- ``create_legacy_scene``: a single sphere in front of the origin, viewed by
  the fixed-basis camera with a 2:1 image plane from (-2, -1, -1).

Example:
    >>> from raytrace.camera.pinhole import setup_camera
    >>> from raytrace.scene.presets import create_default_scene
    >>>
    >>> scene, camera_config = create_default_scene()
    >>> world = scene.build()
    >>> camera = setup_camera(camera_config)
"""

from dataclasses import dataclass

from raytrace.camera.pinhole import Camera, PinholeCamera
from raytrace.scene.manager import SceneManager

# =============================================================================
# Default Scene Parameters
# =============================================================================


@dataclass
class DefaultSceneParams:
    """Parameters for configuring the default scene.

    Attributes:
        center_color: Base colour of the diffuse center sphere.
        ground_color: Base colour of the ground sphere.
        mirror_color: Base colour of the left mirror sphere.
        metal_color: Base colour of the right brushed-metal sphere.
        metal_reflectivity: Mirror weight of the right sphere.
        albedo: Albedo shared by all materials.
        vertical_fov: Camera field of view in degrees.
        aspect_ratio: Camera aspect ratio (width / height).
    """

    center_color: tuple[float, float, float] = (0.8, 0.3, 0.3)
    ground_color: tuple[float, float, float] = (0.8, 0.8, 0.0)
    mirror_color: tuple[float, float, float] = (0.8, 0.8, 0.8)
    metal_color: tuple[float, float, float] = (0.8, 0.6, 0.2)
    metal_reflectivity: float = 0.7
    albedo: float = 0.5
    vertical_fov: float = 45.0
    aspect_ratio: float = 2.0


# Fixed-basis camera of the legacy scene
LEGACY_ORIGIN = (0.0, 0.0, 0.0)
LEGACY_LOWER_LEFT_CORNER = (-2.0, -1.0, -1.0)
LEGACY_HORIZONTAL = (4.0, 0.0, 0.0)
LEGACY_VERTICAL = (0.0, 2.0, 0.0)

# Sphere of the legacy scene
LEGACY_SPHERE_CENTER = (0.0, 0.0, -1.0)
LEGACY_SPHERE_RADIUS = 0.5


# =============================================================================
# Scene Factories
# =============================================================================


def create_default_scene(
    params: DefaultSceneParams | None = None,
) -> tuple[SceneManager, PinholeCamera]:
    """Create the default four-sphere scene.

    Args:
        params: Optional parameters; defaults to ``DefaultSceneParams()``.

    Returns:
        A tuple of (SceneManager, PinholeCamera). The camera configuration is
        also stored on the scene manager.
    """
    if params is None:
        params = DefaultSceneParams()

    scene = SceneManager()
    scene.add_standard_sphere(
        (0.0, 0.0, -1.0), 0.5, params.center_color, reflectivity=0.0, albedo=params.albedo
    )
    scene.add_standard_sphere(
        (0.0, -100.5, -1.0), 100.0, params.ground_color, reflectivity=0.0, albedo=params.albedo
    )
    scene.add_standard_sphere(
        (-1.0, 0.0, -1.0), 0.5, params.mirror_color, reflectivity=1.0, albedo=params.albedo
    )
    scene.add_standard_sphere(
        (1.0, 0.0, -1.0),
        0.5,
        params.metal_color,
        reflectivity=params.metal_reflectivity,
        albedo=params.albedo,
    )

    camera = PinholeCamera(
        look_from=(0.0, 0.0, 0.0),
        look_to=(0.0, 0.0, -1.0),
        up=(0.0, 1.0, 0.0),
        vertical_fov=params.vertical_fov,
        aspect_ratio=params.aspect_ratio,
    )
    scene.set_camera(camera)

    return scene, camera


def create_legacy_scene() -> tuple[SceneManager, Camera]:
    """Create the single-sphere scene with the fixed-basis camera.

    Returns:
        A tuple of (SceneManager, Camera).
    """
    scene = SceneManager()
    scene.add_standard_sphere(LEGACY_SPHERE_CENTER, LEGACY_SPHERE_RADIUS, (0.5, 0.5, 0.5))
    camera = Camera.from_basis(
        origin=LEGACY_ORIGIN,
        lower_left_corner=LEGACY_LOWER_LEFT_CORNER,
        horizontal=LEGACY_HORIZONTAL,
        vertical=LEGACY_VERTICAL,
    )
    return scene, camera
