"""Image export utilities for rendered images.

This module provides functions for saving rendered images to files.

Supported formats:
    - PPM (plain-text P3, byte-compatible with ``Image.write_to``)
    - PNG and anything else Pillow can write (8-bit RGB)

Rendered images are already gamma corrected and scaled to
``[0, max_channel_value]``, so export only rescales to 8 bits.

Example:
    >>> from raytrace.preview.export import save_image
    >>> image = renderer.render()
    >>> save_image(image, "output.png")
    >>> save_image(image, "output.ppm")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

if TYPE_CHECKING:
    from raytrace.core.image import Image

PPM_SUFFIXES = {".ppm", ".pnm"}


def image_to_uint8(image: Image) -> npt.NDArray[np.uint8]:
    """Convert a rendered image to an 8-bit array for display/export.

    Channels are normalized by ``max_channel_value``, clamped to [0, 1]
    and rounded to the nearest 8-bit level.

    Args:
        image: The rendered image.

    Returns:
        8-bit image array of shape (H, W, 3) with dtype uint8.
    """
    normalized = image.to_numpy() / image.max_channel_value
    normalized = np.nan_to_num(normalized, nan=0.0, posinf=1.0, neginf=0.0)
    normalized = np.clip(normalized, 0.0, 1.0)
    return np.rint(normalized * 255.0).astype(np.uint8)


def save_ppm(image: Image, filepath: str | Path) -> None:
    """Save the image as a plain-text PPM file.

    Args:
        image: The rendered image.
        filepath: Output file path.

    Raises:
        OSError: If the file cannot be written.
    """
    with open(filepath, "w", encoding="ascii", newline="\n") as stream:
        image.write_to(stream)


def save_png(image: Image, filepath: str | Path) -> None:
    """Save the image as an 8-bit RGB file through Pillow.

    The format is chosen by Pillow from the file extension.

    Args:
        image: The rendered image.
        filepath: Output file path (e.g. "output.png").

    Raises:
        OSError: If the file cannot be written.
    """
    pil_image = PILImage.fromarray(image_to_uint8(image))
    pil_image.save(filepath)


def save_image(image: Image, filepath: str | Path) -> Path:
    """Save the image, choosing the writer from the file extension.

    ``.ppm`` and ``.pnm`` get the plain-text writer, every other extension
    goes through Pillow.

    Returns:
        The path written.
    """
    path = Path(filepath)
    if path.suffix.lower() in PPM_SUFFIXES:
        save_ppm(image, path)
    else:
        save_png(image, path)
    return path
