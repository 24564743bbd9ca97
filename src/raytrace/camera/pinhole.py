"""Pinhole camera model for perspective projection ray generation.

This module implements a pinhole camera that generates primary rays for
rendering. A camera can be built in two equivalent ways:

- Derived form: a ``PinholeCamera`` configuration (look-from position, view
  direction, up vector, vertical field of view, aspect ratio) turned into a
  ``Camera`` by ``setup_camera``.
- Legacy form: ``Camera.from_basis`` with the image plane given directly by
  its lower-left corner and its horizontal and vertical span vectors.

The derived basis is computed once per camera:

    hb = normalize(cross(look_to, up)) * aspect_ratio
    vb = normalize(cross(hb, look_to))
    lower_left = look_from + normalize(look_to) / tan(radians(vfov)) - hb - vb
    horizontal = 2 * hb
    vertical = 2 * vb

The image plane therefore sits at distance ``1 / tan(vfov)`` from the camera
with a half-height of 1, so ``vertical_fov`` is the angle between the view
direction and the top edge of the image.

Example:
    >>> from raytrace.camera.pinhole import PinholeCamera, setup_camera
    >>>
    >>> # Camera at the origin looking down -z
    >>> config = PinholeCamera(
    ...     look_from=(0.0, 0.0, 0.0),
    ...     look_to=(0.0, 0.0, -1.0),
    ...     up=(0.0, 1.0, 0.0),
    ...     vertical_fov=45.0,
    ...     aspect_ratio=2.0,
    ... )
    >>> camera = setup_camera(config)
    >>>
    >>> # Ray through the image center
    >>> ray = camera.get_ray(0.5, 0.5)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from raytrace.core.ray import Ray
from raytrace.core.vector import Vector3

# =============================================================================
# Camera Data Structures
# =============================================================================


@dataclass
class PinholeCamera:
    """Configuration for a pinhole (perspective) camera.

    Attributes:
        look_from: Camera position in world space (x, y, z).
        look_to: Viewing direction in world space (x, y, z). This is a
            direction, not a target point.
        up: Up direction vector for camera orientation (typically (0, 1, 0)).
        vertical_fov: Angle in degrees between the view direction and the top
            edge of the image (0 < vertical_fov < 90).
        aspect_ratio: Width divided by height of the output image.
    """

    look_from: tuple[float, float, float] = (0.0, 0.0, 0.0)
    look_to: tuple[float, float, float] = (0.0, 0.0, -1.0)
    up: tuple[float, float, float] = (0.0, 1.0, 0.0)
    vertical_fov: float = 45.0
    aspect_ratio: float = 2.0

    def __post_init__(self) -> None:
        if not 0.0 < self.vertical_fov < 90.0:
            raise ValueError(f"vertical_fov must be in (0, 90) degrees, got {self.vertical_fov}")
        if not self.aspect_ratio > 0.0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")

    def to_dict(self) -> dict[str, Any]:
        """Export the configuration as JSON-compatible values."""
        return {
            "look_from": list(self.look_from),
            "look_to": list(self.look_to),
            "up": list(self.up),
            "vertical_fov": self.vertical_fov,
            "aspect_ratio": self.aspect_ratio,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PinholeCamera:
        """Build a configuration from a dictionary, using defaults for missing keys."""
        defaults = cls()
        return cls(
            look_from=_as_triple(data.get("look_from", defaults.look_from)),
            look_to=_as_triple(data.get("look_to", defaults.look_to)),
            up=_as_triple(data.get("up", defaults.up)),
            vertical_fov=float(data.get("vertical_fov", defaults.vertical_fov)),
            aspect_ratio=float(data.get("aspect_ratio", defaults.aspect_ratio)),
        )


def _as_triple(values: Any) -> tuple[float, float, float]:
    x, y, z = values
    return (float(x), float(y), float(z))


class Camera:
    """A camera ready for ray generation.

    Rays start at ``origin`` and pass through the image plane point
    ``lower_left_corner + u * horizontal + v * vertical``. Ray directions are
    not normalized.

    Attributes:
        origin: Camera position.
        lower_left_corner: Lower-left corner of the image plane.
        horizontal: Full width of the image plane.
        vertical: Full height of the image plane.
        aspect_ratio: Width divided by height of the output image.
    """

    def __init__(
        self,
        origin: Vector3,
        lower_left_corner: Vector3,
        horizontal: Vector3,
        vertical: Vector3,
        aspect_ratio: float | None = None,
    ) -> None:
        """Initialize the camera.

        Args:
            origin: Camera position.
            lower_left_corner: Lower-left corner of the image plane.
            horizontal: Full width of the image plane.
            vertical: Full height of the image plane.
            aspect_ratio: Aspect ratio of the output image. Defaults to
                ``|horizontal| / |vertical|``.
        """
        self.origin = origin.copy()
        self.lower_left_corner = lower_left_corner.copy()
        self.horizontal = horizontal.copy()
        self.vertical = vertical.copy()
        if aspect_ratio is None:
            aspect_ratio = self.horizontal.length() / self.vertical.length()
        self.aspect_ratio = float(aspect_ratio)

    @classmethod
    def from_basis(
        cls,
        origin: tuple[float, float, float] | Vector3,
        lower_left_corner: tuple[float, float, float] | Vector3,
        horizontal: tuple[float, float, float] | Vector3,
        vertical: tuple[float, float, float] | Vector3,
    ) -> Camera:
        """Build a camera from explicit image-plane vectors (legacy form).

        The aspect ratio is taken from the span lengths.
        """
        return cls(
            origin=Vector3.from_iterable(origin),
            lower_left_corner=Vector3.from_iterable(lower_left_corner),
            horizontal=Vector3.from_iterable(horizontal),
            vertical=Vector3.from_iterable(vertical),
        )

    def get_ray(self, u: float, v: float) -> Ray:
        """Generate a ray through normalized image coordinates (u, v).

        The coordinates are normalized:
        - u = 0: left edge of image
        - u = 1: right edge of image
        - v = 0: bottom edge of image
        - v = 1: top edge of image

        Values slightly outside [0, 1] (from anti-aliasing jitter at the
        border pixels) are allowed.

        Args:
            u: Horizontal coordinate (left to right).
            v: Vertical coordinate (bottom to top).

        Returns:
            A Ray with origin at the camera position and direction toward
            the specified point on the image plane.
        """
        point_on_plane = self.lower_left_corner + self.horizontal * u + self.vertical * v
        return Ray(origin=self.origin, direction=point_on_plane - self.origin)

    def __repr__(self) -> str:
        return (
            f"Camera(origin={self.origin!r}, lower_left_corner={self.lower_left_corner!r}, "
            f"horizontal={self.horizontal!r}, vertical={self.vertical!r}, "
            f"aspect_ratio={self.aspect_ratio!r})"
        )


# =============================================================================
# Camera Setup
# =============================================================================


def setup_camera(config: PinholeCamera) -> Camera:
    """Compute the image-plane basis from a camera configuration.

    Args:
        config: Camera configuration with position, orientation and FOV.

    Returns:
        A Camera with the derived origin, lower-left corner and span vectors.
    """
    look_from = Vector3.from_iterable(config.look_from)
    look_to = Vector3.from_iterable(config.look_to)
    up = Vector3.from_iterable(config.up)

    horizontal_basis = look_to.cross(up).normalized() * config.aspect_ratio
    vertical_basis = horizontal_basis.cross(look_to).normalized()

    distance = 1.0 / math.tan(math.radians(config.vertical_fov))
    lower_left = look_from + look_to.normalized() * distance - horizontal_basis - vertical_basis

    return Camera(
        origin=look_from,
        lower_left_corner=lower_left,
        horizontal=horizontal_basis * 2.0,
        vertical=vertical_basis * 2.0,
        # The span lengths can be off by an ulp for tilted views
        aspect_ratio=config.aspect_ratio,
    )


def get_camera_info(camera: Camera) -> dict[str, tuple[float, float, float]]:
    """Get camera vectors as plain tuples for inspection.

    Returns:
        Dictionary with origin, lower_left, horizontal and vertical.
    """
    return {
        "origin": camera.origin.to_tuple(),
        "lower_left": camera.lower_left_corner.to_tuple(),
        "horizontal": camera.horizontal.to_tuple(),
        "vertical": camera.vertical.to_tuple(),
    }
