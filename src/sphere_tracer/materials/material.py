# materials/material.py
from typing import Union
from sphere_tracer.core.vector import Vector3
from sphere_tracer.materials.textures import Texture, SolidTexture

class Material:
    """
    Surface description queried by the shading core at every hit.

    Each material answers four questions: its diffuse color at a point,
    how much of the light it reflects, how much it lets through, and its
    index of refraction. The diffuse color comes from a texture; passing a
    plain Vector3 wraps it in a SolidTexture.

    Ratios are validated here so that bad values never reach the renderer.
    """
    def __init__(self, albedo: Union[Vector3, Texture], reflection: float = 0.0,
                 transparency: float = 0.0, ior: float = 1.0):
        if isinstance(albedo, Vector3):
            self.texture = SolidTexture(albedo)
        else:
            self.texture = albedo
        if not 0.0 <= reflection <= 1.0:
            raise ValueError(f"reflection must be in [0, 1], got {reflection}")
        if not 0.0 <= transparency <= 1.0:
            raise ValueError(f"transparency must be in [0, 1], got {transparency}")
        if ior < 1.0:
            raise ValueError(f"ior must be >= 1, got {ior}")
        self.reflection_ratio = float(reflection)
        self.transparency_ratio = float(transparency)
        self.refractive_index = float(ior)

    def diffuse(self, point: Vector3) -> Vector3:
        return self.texture.sample(point)

    def reflection(self, point: Vector3 = None) -> float:
        return self.reflection_ratio

    def transparency(self) -> float:
        return self.transparency_ratio

    def ior(self) -> float:
        return self.refractive_index

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(reflection={self.reflection_ratio}, "
                f"transparency={self.transparency_ratio}, ior={self.refractive_index})")
