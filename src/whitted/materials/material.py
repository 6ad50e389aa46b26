"""Phong material model.

A material bundles a surface's optical properties: where its color comes
from (a flat color or a procedural pattern), the Phong reflection
coefficients, and the reflectivity, transparency and refractive index used
by the recursive integrator.

Local illumination follows the Phong model:
    effective = surface color * light intensity
    ambient   = effective * ambient
    diffuse   = effective * diffuse * (L . N)
    specular  = intensity * specular * (R . E)^shininess

where L points to the light, N is the surface normal, R is -L reflected
about N and E points to the eye. Shadowed points receive ambient light
only. Results are unclamped.

Example:
    >>> from whitted.core.color import color
    >>> from whitted.materials.material import Material
    >>> glass = Material(transparency=1.0, refractive_index=1.5)
    >>> red = Material(coloring=color(1.0, 0.0, 0.0), specular=0.3)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

import numpy as np

from whitted.core.color import WHITE, Color
from whitted.core.ray import Tuple4, dot, normalize, reflect
from whitted.materials.pattern import Pattern

if TYPE_CHECKING:
    from whitted.scene.light import PointLight
    from whitted.scene.object import SceneObject

# Common refractive indices
VACUUM_INDEX = 1.0
AIR_INDEX = 1.00029
WATER_INDEX = 1.333
GLASS_INDEX = 1.5
DIAMOND_INDEX = 2.417


@dataclass(frozen=True, eq=False)
class Material:
    """Optical properties of a surface.

    Materials are immutable and may be shared between objects; derive
    variants with ``dataclasses.replace``.

    Attributes:
        coloring: A flat color (RGB array) or a :class:`Pattern`.
        ambient: Ambient reflection coefficient (>= 0).
        diffuse: Diffuse reflection coefficient (>= 0).
        specular: Specular reflection coefficient (>= 0).
        shininess: Specular exponent (>= 0); larger is a tighter highlight.
        reflective: Mirror reflectivity in [0, 1].
        transparency: Fraction of light transmitted, in [0, 1].
        refractive_index: Index of refraction (> 0). 1.0 is vacuum.
    """

    coloring: Union[Color, Pattern] = field(default_factory=lambda: WHITE.copy())
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = VACUUM_INDEX

    def __post_init__(self) -> None:
        if not isinstance(self.coloring, Pattern):
            object.__setattr__(self, "coloring", np.asarray(self.coloring, dtype=np.float64))

        for name in ("ambient", "diffuse", "specular", "shininess"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"Material {name} = {value} is negative.")

        for name in ("reflective", "transparency"):
            value = getattr(self, name)
            if value < 0.0 or value > 1.0:
                raise ValueError(f"Material {name} = {value} is outside [0, 1].")

        if self.refractive_index <= 0.0:
            raise ValueError(
                f"Refractive index = {self.refractive_index} must be positive."
            )

    def surface_color(self, obj: SceneObject, world_point: Tuple4) -> Color:
        """Resolve the unlit surface color at a world-space point on ``obj``."""
        if isinstance(self.coloring, Pattern):
            return self.coloring.color_at(obj, world_point)
        return self.coloring

    def lighting(
        self,
        light: PointLight,
        obj: SceneObject,
        point: Tuple4,
        eye: Tuple4,
        normal: Tuple4,
        in_shadow: bool = False,
    ) -> Color:
        """Shade a point with the Phong reflection model.

        Args:
            light: The point light illuminating the scene.
            obj: The object being shaded (needed to evaluate patterns).
            point: The world-space point being shaded.
            eye: Unit vector from the point toward the eye.
            normal: Unit surface normal at the point, facing the eye.
            in_shadow: Whether something blocks the light from the point.

        Returns:
            The sum of the ambient, diffuse and specular contributions.
        """
        effective_color = self.surface_color(obj, point) * light.intensity
        ambient = effective_color * self.ambient

        if in_shadow:
            return ambient

        light_vector = normalize(light.position - point)

        # Cosine between light and normal; negative means the light is
        # on the other side of the surface
        light_dot_normal = dot(light_vector, normal)
        if light_dot_normal < 0.0:
            return ambient

        diffuse = effective_color * (self.diffuse * light_dot_normal)

        # Cosine between reflected light and eye; negative means the light
        # reflects away from the eye
        reflect_vector = reflect(-light_vector, normal)
        reflect_dot_eye = dot(reflect_vector, eye)
        if reflect_dot_eye <= 0.0:
            return ambient + diffuse

        factor = reflect_dot_eye**self.shininess
        specular = light.intensity * (self.specular * factor)
        return ambient + diffuse + specular


DEFAULT_MATERIAL = Material()
