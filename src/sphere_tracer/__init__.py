from sphere_tracer.core.vector import Vector3
from sphere_tracer.core.matrix import Matrix3
from sphere_tracer.core.ray import Ray
from sphere_tracer.geometry.sphere import Sphere
from sphere_tracer.geometry.light import Light
from sphere_tracer.geometry.scene import Scene
from sphere_tracer.materials.material import Material
from sphere_tracer.materials.solid import Solid
from sphere_tracer.materials.checkerboard import CheckerBoard
from sphere_tracer.materials.shiny import Shiny
from sphere_tracer.materials.glass import Glass
from sphere_tracer.camera.camera import Camera
from sphere_tracer.renderer.raytracer import Renderer, render

__version__ = "0.1.0"
