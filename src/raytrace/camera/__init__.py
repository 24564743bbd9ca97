"""Camera module for view and ray generation.

Camera responsibilities:
    - Transform (u, v) image coordinates to world-space rays
    - Support look-from positioning with view direction and up vector
    - Support an explicit image-plane basis (legacy form)

Ray generation uses normalized image coordinates:
    u in [0, 1]: left to right across image
    v in [0, 1]: bottom to top across image
"""

from .pinhole import (
    Camera,
    PinholeCamera,
    get_camera_info,
    setup_camera,
)

__all__ = [
    "Camera",
    "PinholeCamera",
    "setup_camera",
    "get_camera_info",
]
