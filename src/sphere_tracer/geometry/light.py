# geometry/light.py
from sphere_tracer.core.vector import Vector3

class Light:
    """
    A point light. Color is emitted radiance and may exceed 1 per channel.
    """
    __slots__ = ("position", "color")

    def __init__(self, position: Vector3, color: Vector3):
        self.position = position
        self.color = color

    def direction_from(self, point: Vector3) -> Vector3:
        """Unit vector from point toward the light."""
        return (self.position - point).normalized()

    def __repr__(self) -> str:
        return f"Light(position={self.position!r}, color={self.color!r})"
