"""Per-pixel render loop with anti-aliasing and progress reporting.

This module drives the image loop: for every pixel it averages several
jittered camera samples, gamma-corrects the average and scales it to the
output channel range. It supports:
- Seedable, injected random generators for reproducible renders
- A configurable bounce limit
- Throttled progress callbacks for long renders

Rows are produced top to bottom (``y`` from ``height - 1`` down to ``0``),
columns left to right, matching the plain-text PPM layout.

Example:
    >>> from raytrace.camera.pinhole import PinholeCamera, setup_camera
    >>> from raytrace.core.renderer import Renderer, RenderSettings
    >>> from raytrace.scene.presets import create_default_scene
    >>>
    >>> manager, camera_config = create_default_scene()
    >>> renderer = Renderer(manager.build(), setup_camera(camera_config),
    ...                     RenderSettings(horizontal_pixels=200, aa_samples=10, seed=42))
    >>> image = renderer.render()
"""

from __future__ import annotations

import math
import time
from collections.abc import Callable
from dataclasses import dataclass

from raytrace.camera.pinhole import Camera
from raytrace.core.image import DEFAULT_MAX_CHANNEL_VALUE, Image
from raytrace.core.integrator import MAX_DEPTH, Integrator, PathIntegrator
from raytrace.core.sampling import UniformSource, make_rng
from raytrace.core.vector import Vector3
from raytrace.geometry.hittable import Hittable

# Type alias for progress callback
# Callback receives (rows_completed, total_rows)
ProgressCallback = Callable[[int, int], None]

# Minimum wall-clock seconds between two progress callbacks
DEFAULT_PROGRESS_INTERVAL = 30.0


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def image_dimensions(horizontal_pixels: float, aspect_ratio: float) -> tuple[int, int]:
    """Derive the pixel grid from the requested width and an aspect ratio.

    Both dimensions are rounded half away from zero, so 5 pixels at an
    aspect ratio of 2 give a height of 3.

    Returns:
        Tuple of (width, height).
    """
    width = round_half_away_from_zero(horizontal_pixels)
    height = round_half_away_from_zero(horizontal_pixels / aspect_ratio)
    return width, height


@dataclass
class RenderSettings:
    """Configuration for a render.

    Attributes:
        horizontal_pixels: Requested image width; must be greater than 1.
        aa_samples: Jittered samples averaged per pixel (at least 1).
        max_depth: Maximum surface bounces per path.
        seed: Seed for the default random generator. None draws fresh
            entropy, so renders differ between runs.
        progress_interval: Minimum seconds between progress callbacks.
        max_channel_value: Value of a fully saturated output channel.
    """

    horizontal_pixels: float = 200.0
    aa_samples: int = 100
    max_depth: int = MAX_DEPTH
    seed: int | None = None
    progress_interval: float = DEFAULT_PROGRESS_INTERVAL
    max_channel_value: float = DEFAULT_MAX_CHANNEL_VALUE

    def __post_init__(self) -> None:
        if not self.horizontal_pixels > 1:
            raise ValueError(
                f"horizontal_pixels must be greater than 1, got {self.horizontal_pixels}"
            )
        if self.aa_samples < 1:
            raise ValueError(f"aa_samples must be at least 1, got {self.aa_samples}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
        if self.progress_interval < 0:
            raise ValueError(
                f"progress_interval must be non-negative, got {self.progress_interval}"
            )


def gamma_correct(color: Vector3) -> Vector3:
    """Apply gamma 2 correction (square root per channel)."""
    return Vector3(math.sqrt(color.x), math.sqrt(color.y), math.sqrt(color.z))


class Renderer:
    """Render a scene through a camera into an Image.

    The renderer owns one random generator which feeds both the pixel jitter
    and the material scattering, so a seeded generator gives a reproducible
    image.

    Attributes:
        scene: The hittable aggregate to render.
        camera: The camera generating primary rays.
        settings: Render configuration.
        rng: The random generator in use.
        integrator: The colour integrator (a PathIntegrator by default).
    """

    def __init__(
        self,
        scene: Hittable,
        camera: Camera,
        settings: RenderSettings | None = None,
        *,
        rng: UniformSource | None = None,
        integrator: Integrator | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the renderer.

        Args:
            scene: The hittable aggregate to render.
            camera: The camera generating primary rays.
            settings: Render configuration. Defaults to ``RenderSettings()``.
            rng: Random generator. Defaults to
                ``numpy.random.default_rng(settings.seed)``.
            integrator: Colour integrator. Defaults to a PathIntegrator over
                ``scene`` sharing ``rng``.
            clock: Monotonic time source used to throttle progress callbacks.
        """
        self.scene = scene
        self.camera = camera
        self.settings = settings if settings is not None else RenderSettings()
        self.rng = rng if rng is not None else make_rng(self.settings.seed)
        self.integrator = (
            integrator
            if integrator is not None
            else PathIntegrator(scene, self.rng, max_depth=self.settings.max_depth)
        )
        self._clock = clock

    @property
    def dimensions(self) -> tuple[int, int]:
        """The (width, height) this renderer will produce."""
        return image_dimensions(self.settings.horizontal_pixels, self.camera.aspect_ratio)

    def render(self, callback: ProgressCallback | None = None) -> Image:
        """Render the full image.

        Args:
            callback: Optional callback receiving (rows_completed, total_rows).
                It is called at most once per ``progress_interval`` seconds
                while rendering, and always once when the image is complete.

        Returns:
            The rendered Image.

        Raises:
            ValueError: If the derived image height is less than 2.
        """
        width, height = self.dimensions
        if height < 2 or width < 2:
            raise ValueError(
                f"Derived image size {width}x{height} is too small; "
                "increase horizontal_pixels so that both dimensions are at least 2"
            )

        pixels: list[Vector3] = []
        last_report = self._clock()
        for rows_done, y in enumerate(range(height - 1, -1, -1), start=1):
            for x in range(width):
                pixels.append(self.render_pixel(x, y, width, height))

            if callback is not None and rows_done < height:
                now = self._clock()
                if now - last_report >= self.settings.progress_interval:
                    callback(rows_done, height)
                    last_report = now

        if callback is not None:
            callback(height, height)

        return Image(
            width=width,
            height=height,
            max_channel_value=self.settings.max_channel_value,
            pixels=pixels,
        )

    def render_pixel(self, x: int, y: int, width: int, height: int) -> Vector3:
        """Average the jittered samples of one pixel.

        Args:
            x: Pixel column (0 = left).
            y: Pixel row (0 = bottom).
            width: Image width in pixels.
            height: Image height in pixels.

        Returns:
            The gamma-corrected colour scaled to ``max_channel_value``.
        """
        average = Vector3(0.0, 0.0, 0.0)
        for n in range(1, self.settings.aa_samples + 1):
            u = (x + float(self.rng.random()) - 0.5) / (width - 1)
            v = (y + float(self.rng.random()) - 0.5) / (height - 1)
            sample = self.integrator.ray_color(self.camera.get_ray(u, v))

            # Non-finite samples contribute nothing
            if not sample.is_finite():
                sample = Vector3(0.0, 0.0, 0.0)

            # Running average: avg_n = avg_{n-1} + (x_n - avg_{n-1}) / n
            average += (sample - average) / n

        return gamma_correct(average) * self.settings.max_channel_value

    def __repr__(self) -> str:
        width, height = self.dimensions
        return (
            f"Renderer(width={width}, height={height}, "
            f"aa_samples={self.settings.aa_samples}, max_depth={self.settings.max_depth})"
        )


def render(
    scene: Hittable,
    camera: Camera,
    horizontal_pixels: float,
    aa_samples: int,
    *,
    rng: UniformSource | None = None,
    max_depth: int = MAX_DEPTH,
    seed: int | None = None,
    callback: ProgressCallback | None = None,
    progress_interval: float = DEFAULT_PROGRESS_INTERVAL,
) -> Image:
    """Render a scene in one call.

    Args:
        scene: The hittable aggregate to render.
        camera: The camera generating primary rays.
        horizontal_pixels: Requested image width (> 1). The height is
            derived from the camera's aspect ratio.
        aa_samples: Samples averaged per pixel (>= 1).
        rng: Random generator; overrides ``seed`` when given.
        max_depth: Maximum surface bounces per path.
        seed: Seed for the default generator.
        callback: Optional progress callback (rows_completed, total_rows).
        progress_interval: Minimum seconds between progress callbacks.

    Returns:
        The rendered Image.
    """
    settings = RenderSettings(
        horizontal_pixels=horizontal_pixels,
        aa_samples=aa_samples,
        max_depth=max_depth,
        seed=seed,
        progress_interval=progress_interval,
    )
    return Renderer(scene, camera, settings, rng=rng).render(callback)
