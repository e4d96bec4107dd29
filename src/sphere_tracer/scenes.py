# scenes.py
from sphere_tracer.core.vector import Vector3
from sphere_tracer.geometry.scene import Scene
from sphere_tracer.geometry.sphere import Sphere
from sphere_tracer.geometry.light import Light
from sphere_tracer.materials.solid import Solid
from sphere_tracer.materials.presets import ColorPresets, MirrorPresets, DielectricPresets, GroundPresets

GROUND_RADIUS = 10000.0

def create_world() -> Scene:
    """
    Checkerboard ground, a large and two small mirror spheres, and a glass
    sphere in front, lit by one bright light behind the camera.
    """
    scene = Scene()
    shiny = MirrorPresets.shiny()
    scene.add(Sphere(Vector3(0, -GROUND_RADIUS - 2, -20), GROUND_RADIUS, GroundPresets.checkerboard()))
    scene.add(Sphere(Vector3(0, 2, -20), 4, shiny))
    scene.add(Sphere(Vector3(5, 0, -15), 2, shiny))
    scene.add(Sphere(Vector3(-5, 0, -15), 2, shiny))
    scene.add(Sphere(Vector3(-2, -1, -10), 1, DielectricPresets.glass()))
    scene.add_light(Light(Vector3(-10, 20, 30), Vector3(2, 2, 2)))
    return scene

def create_colored_world() -> Scene:
    """
    The same layout with per-sphere colours and plain reflection ratios.
    """
    scene = Scene()
    scene.add(Sphere(Vector3(0, -GROUND_RADIUS - 2, -20), GROUND_RADIUS, GroundPresets.soft_checkerboard()))
    scene.add(Sphere(Vector3(0, 2, -20), 4, MirrorPresets.polished(ColorPresets.ROSE)))
    scene.add(Sphere(Vector3(5, 0, -15), 2, MirrorPresets.glossy(ColorPresets.TEAL)))
    scene.add(Sphere(Vector3(-5, 0, -15), 2, MirrorPresets.glossy(ColorPresets.STEEL)))
    scene.add(Sphere(Vector3(-2, -1, -10), 1,
                     Solid(ColorPresets.SMOKE, reflection=0.1, transparency=0.8, ior=1.5)))
    scene.add_light(Light(Vector3(-10, 20, 30), Vector3(2, 2, 2)))
    return scene

SCENES = {
    "default": create_world,
    "colored": create_colored_world,
}
