# materials/shiny.py
from sphere_tracer.core.vector import Vector3
from sphere_tracer.materials.material import Material

class Shiny(Material):
    """
    Mirror-like material: a muted blue base with strong reflection.
    """
    def __init__(self, color: Vector3 = Vector3(0.6, 0.8, 1.0), reflection: float = 0.5):
        super().__init__(color, reflection=reflection)
