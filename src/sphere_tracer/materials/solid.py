# materials/solid.py
from sphere_tracer.core.vector import Vector3
from sphere_tracer.materials.material import Material

class Solid(Material):
    """
    Single-colour material. Reflection and transparency default to 0 but may
    be set, which covers the per-sphere settings of simple scenes.
    """
    def __init__(self, color: Vector3, reflection: float = 0.0,
                 transparency: float = 0.0, ior: float = 1.0):
        super().__init__(color, reflection=reflection,
                         transparency=transparency, ior=ior)
        self.color = color
