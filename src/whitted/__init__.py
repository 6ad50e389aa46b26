"""Whitted-style recursive ray tracer.

This package computes the color seen along an eye ray by combining Phong
local illumination, shadow rays, and recursive mirror reflection and
refraction with Fresnel blending.

Subpackages:
    core: Tuples, rays, colors, transforms, and the recursive integrator
    geometry: Shape primitives (sphere, plane, cube, cylinder, cone)
    materials: Phong material model and procedural patterns
    scene: Scene objects, intersections, lights, and the world
    camera: Pinhole camera generating one eye ray per pixel
    preview: Image export utilities
"""

__version__ = "0.1.0"
