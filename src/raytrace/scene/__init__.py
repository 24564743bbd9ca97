"""Scene module for scene construction and configuration.

Components:
    manager: SceneManager with material registry and JSON serialization
    presets: Factory functions for the example scenes
"""

from .manager import (
    MaterialInfo,
    MaterialType,
    SceneConfig,
    SceneManager,
    SphereInfo,
)
from .presets import (
    DefaultSceneParams,
    create_default_scene,
    create_legacy_scene,
)

__all__ = [
    "SceneManager",
    "SceneConfig",
    "MaterialInfo",
    "MaterialType",
    "SphereInfo",
    "DefaultSceneParams",
    "create_default_scene",
    "create_legacy_scene",
]
