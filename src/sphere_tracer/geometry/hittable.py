# geometry/hittable.py
from typing import Optional
from sphere_tracer.core.vector import Vector3
from sphere_tracer.core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, inside: bool = False, material = None, obj = None):
        self.p = p              # Intersection point
        self.normal = normal    # Surface normal, always facing the incoming ray
        self.t = t              # Ray parameter at intersection
        self.inside = inside    # True when the ray leaves the object through a back face
        self.material = material
        self.obj = obj

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.inside = outward_normal.dot(ray.direction) > 0
        self.normal = -outward_normal if self.inside else outward_normal

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    material = None

    def intersect(self, ray: Ray) -> Optional[float]:
        raise NotImplementedError("intersect() must be implemented by subclasses.")

    def normal(self, point: Vector3) -> Vector3:
        raise NotImplementedError("normal() must be implemented by subclasses.")

    def hit(self, ray: Ray) -> Optional[HitRecord]:
        t = self.intersect(ray)
        if t is None:
            return None
        return self.record(ray, t)

    def record(self, ray: Ray, t: float) -> HitRecord:
        """
        Builds the hit record for a distance already returned by intersect().
        """
        rec = HitRecord(t=t, material=self.material, obj=self)
        rec.p = ray.at(t)
        rec.set_face_normal(ray, self.normal(rec.p))
        return rec
