# core/utils.py
import math
from typing import Optional
from sphere_tracer.core.vector import Vector3

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * (2 * v.dot(n))

def refract(v: Vector3, n: Vector3, eta: float) -> Optional[Vector3]:
    """
    Bends unit direction v through a surface with unit normal n facing v.
    eta is the ratio incident_ior / transmitted_ior.
    Returns None on total internal reflection.
    """
    cos_incident = -v.dot(n)
    sin2_transmitted = (1.0 - cos_incident * cos_incident) * eta * eta
    if sin2_transmitted >= 1.0:
        return None
    tangent = (v + n * cos_incident) * eta
    return tangent - n * math.sqrt(1.0 - sin2_transmitted)

def schlick_fresnel(reflection_ratio: float, facing: float) -> float:
    """
    Schlick-style blend weight: reflection_ratio head-on, rising to 1 at
    grazing angles. facing is the clamped cosine between the view ray and
    the normal.
    """
    return reflection_ratio + (1.0 - reflection_ratio) * math.pow(1.0 - facing, 5)
