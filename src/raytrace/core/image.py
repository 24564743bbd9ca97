"""Rendered image buffer and plain-text PPM serialization.

Pixels are stored row-major with the top row first, the order in which the
renderer produces them. Channel values are already scaled to
``[0, max_channel_value]``.

The PPM (P3) layout written by ``Image.write_to`` is:

    P3
    {width} {height}
    {max_channel_value:.0f}
    {r:.0f} {g:.0f} {b:.0f}     <- one line per pixel
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import TextIO

import numpy as np
import numpy.typing as npt

from raytrace.core.vector import Vector3

DEFAULT_MAX_CHANNEL_VALUE = 255.0


@dataclass
class Image:
    """A rendered RGB image.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        max_channel_value: Value of a fully saturated channel.
        pixels: Pixel colours, row-major, top row first.
    """

    width: int
    height: int
    max_channel_value: float = DEFAULT_MAX_CHANNEL_VALUE
    pixels: list[Vector3] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"Image of {self.width}x{self.height} needs {self.width * self.height} "
                f"pixels, got {len(self.pixels)}"
            )

    def write_to(self, stream: TextIO) -> None:
        """Write the image as plain-text PPM.

        Args:
            stream: Writable text stream. Errors raised by the stream
                propagate to the caller.
        """
        stream.write(f"P3\n{self.width} {self.height}\n{self.max_channel_value:.0f}\n")
        for color in self.pixels:
            stream.write(color.as_display_pixel())
            stream.write("\n")

    def to_ppm(self) -> str:
        """Return the plain-text PPM serialization as a string."""
        buffer = io.StringIO()
        self.write_to(buffer)
        return buffer.getvalue()

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Get the pixels as an array of shape (height, width, 3)."""
        data = np.array([color.to_tuple() for color in self.pixels], dtype=np.float64)
        return data.reshape(self.height, self.width, 3)
