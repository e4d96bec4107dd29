# materials/checkerboard.py
from sphere_tracer.core.vector import Vector3
from sphere_tracer.materials.material import Material
from sphere_tracer.materials.textures import CheckerTexture

WHITE = Vector3(1.0, 1.0, 1.0)
BLACK = Vector3(0.0, 0.0, 0.0)

class CheckerBoard(Material):
    """
    Black and white tiles on the XZ plane, intended for a huge ground sphere.
    """
    def __init__(self, reflection: float = 0.6, white: Vector3 = WHITE,
                 black: Vector3 = BLACK, scale: float = 0.5):
        super().__init__(CheckerTexture(white, black, scale), reflection=reflection)
