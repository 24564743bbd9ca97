"""Stochastic ray tracer for spheres lit by a procedural sky.

This package renders images with recursive Monte Carlo ray tracing, with
support for:
- Anti-aliasing through jittered camera samples
- A blended diffuse/mirror material model
- Sphere primitives grouped in a nearest-hit scene list
- Plain-text PPM and PNG output

Subpackages:
    core: Vectors, rays, sampling, the colour integrator and the render loop
    geometry: Sphere primitive and the hittable scene list
    materials: Scattering models
    camera: Pinhole camera with ray generation
    scene: Scene management, JSON configuration and preset scenes
    preview: Image export utilities
"""

__version__ = "0.1.0"
