"""Materials module for scattering models.

Components:
    material: Base material interface
    standard: Diffuse/mirror blend material

Each material provides:
    - scatter(): The outgoing ray for an incoming ray at a hit point
    - attenuate(): The colour scaling applied along the scattered ray
"""

from .material import Material
from .standard import StandardMaterial

__all__ = [
    "Material",
    "StandardMaterial",
]
