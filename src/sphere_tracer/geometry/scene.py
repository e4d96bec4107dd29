# geometry/scene.py
from typing import List, Optional
from sphere_tracer.core.ray import Ray
from sphere_tracer.geometry.hittable import Hittable, HitRecord
from sphere_tracer.geometry.light import Light

class Scene:
    """
    The objects and lights of one render. Renders only read from the scene;
    build it completely before rendering.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None,
                 lights: Optional[List[Light]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []
        self.lights: List[Light] = list(lights) if lights else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def add_light(self, light: Light):
        self.lights.append(light)

    def clear(self):
        self.objects.clear()
        self.lights.clear()

    def nearest_hit(self, ray: Ray) -> Optional[HitRecord]:
        """
        Linear scan over every object, keeping the closest intersection.
        """
        nearest = None
        nearest_obj = None
        for obj in self.objects:
            distance = obj.intersect(ray)
            if distance is not None and (nearest is None or distance < nearest):
                nearest = distance
                nearest_obj = obj
        if nearest_obj is None:
            return None
        return nearest_obj.record(ray, nearest)

    def occluded(self, ray: Ray) -> bool:
        """True if any object intersects the ray."""
        return any(obj.intersect(ray) is not None for obj in self.objects)
