# materials/glass.py
from sphere_tracer.core.vector import Vector3
from sphere_tracer.materials.material import Material

class Glass(Material):
    """
    Transparent dielectric. Most light is refracted, the rest reflected
    according to the Fresnel blend in the shading core.
    """
    def __init__(self, tint: Vector3 = Vector3(0.1, 0.1, 0.1), reflection: float = 0.3,
                 transparency: float = 0.7, ior: float = 1.5):
        super().__init__(tint, reflection=reflection,
                         transparency=transparency, ior=ior)
