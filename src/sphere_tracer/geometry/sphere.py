# geometry/sphere.py
import math
from typing import Optional
from sphere_tracer.core.vector import Vector3
from sphere_tracer.core.ray import Ray
from sphere_tracer.geometry.hittable import Hittable

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    The material is shared, not copied: several spheres may reference the
    same instance.

    With ``allow_inside=False`` a ray whose origin lies inside the sphere
    reports no hit instead of the exit distance.
    """
    def __init__(self, center: Vector3, radius: float, material, allow_inside: bool = True):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = float(radius)
        self.material = material
        self.allow_inside = allow_inside

    def normal(self, point: Vector3) -> Vector3:
        return (point - self.center).normalized()

    def intersect(self, ray: Ray) -> Optional[float]:
        """
        Geometric ray-sphere test. Returns the distance along the ray to the
        first surface crossing at or ahead of the origin, or None.
        """
        l = self.center - ray.origin
        a = l.dot(ray.direction)
        if a < 0:  # center projects behind the origin
            return None
        b2 = l.dot(l) - a * a
        r2 = self.radius * self.radius
        if b2 > r2:  # perpendicular distance exceeds radius
            return None
        c = math.sqrt(r2 - b2)
        near = a - c
        if near >= 0:
            return near
        # near < 0 means the ray starts inside
        if not self.allow_inside:
            return None
        return a + c

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius})"
