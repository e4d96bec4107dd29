# materials/textures.py
import math
from sphere_tracer.core.vector import Vector3

class Texture:
    """Base class for all textures. Textures are sampled at world-space hit points."""
    def sample(self, point: Vector3) -> Vector3:
        """Sample the texture at the given point."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def sample(self, point: Vector3) -> Vector3:
        return self.color

class CheckerTexture(Texture):
    """
    A checker pattern on the XZ plane. Cells are 1/scale units wide; the
    default scale of 0.5 gives 2x2 unit cells.
    """
    def __init__(self, odd: Vector3, even: Vector3, scale: float = 0.5):
        if scale <= 0:
            raise ValueError(f"Checker scale must be positive, got {scale}")
        self.odd = odd
        self.even = even
        self.scale = scale

    def sample(self, point: Vector3) -> Vector3:
        cell = math.floor(point.z * self.scale) + math.floor(point.x * self.scale)
        return self.odd if cell % 2 != 0 else self.even
