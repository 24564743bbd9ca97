"""Preview module for image output.

Components:
    export: PPM and PNG export utilities

Example:
    >>> from raytrace.preview import save_image
    >>> save_image(image, "output.png")
"""

from raytrace.preview.export import (
    image_to_uint8,
    save_image,
    save_png,
    save_ppm,
)

__all__ = [
    "save_image",
    "save_png",
    "save_ppm",
    "image_to_uint8",
]
