# renderer/raytracer.py
import math
import time
from typing import Iterator, Tuple
import numpy as np
from sphere_tracer.core.vector import Vector3
from sphere_tracer.core.ray import Ray
from sphere_tracer.core.utils import reflect, refract, schlick_fresnel
from sphere_tracer.camera.camera import Camera
from sphere_tracer.geometry.hittable import HitRecord
from sphere_tracer.geometry.scene import Scene
from .tone_mapping import GAMMA, gamma_quantize, reinhard_tone_mapping

# Shading constants
MAX_DEPTH = 6
EPSILON = 1e-5
SPECULAR_EXPONENT = 30
SPECULAR_WEIGHT = 0.5
BACKGROUND = Vector3(0.0, 0.0, 0.0)

REFLECTION_MODELS = ("fresnel", "ratio")
TONE_MAPPERS = ("gamma", "reinhard")

class Renderer:
    """
    Whitted-style recursive ray tracer over a Scene of spheres and point lights.

    Each primary ray is resolved by trace(): the nearest hit is shaded with
    direct light from every unoccluded light, then reflection and refraction
    rays are traced recursively until max_depth. The renderer never modifies
    the scene, so pixels can be shaded in any order.

    reflection_model selects how the reflected color is weighted:
      - "fresnel": by the Schlick blend of the reflection ratio (default)
      - "ratio": by the reflection ratio times the surface's diffuse color
    """
    def __init__(self, width: int, height: int, fov: float = 45.0,
                 max_depth: int = MAX_DEPTH, antialias: bool = False,
                 specular: bool = True, reflection_model: str = "fresnel",
                 background: Vector3 = BACKGROUND, epsilon: float = EPSILON,
                 camera: Camera = None, debug_mode: bool = False):
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        if reflection_model not in REFLECTION_MODELS:
            raise ValueError(f"Unknown reflection model {reflection_model!r}, "
                             f"expected one of {REFLECTION_MODELS}")
        if epsilon <= 0:
            raise ValueError(f"epsilon must be positive, got {epsilon}")
        if camera is not None and (camera.width != width or camera.height != height
                                   or not math.isclose(camera.fov, fov)):
            raise ValueError(f"{camera!r} does not match the requested "
                             f"{width}x{height} image at fov={fov}")
        self.camera = camera if camera is not None else Camera(width, height, fov)
        self.width = self.camera.width
        self.height = self.camera.height
        self.max_depth = max_depth
        self.antialias = antialias
        self.specular = specular
        self.reflection_model = reflection_model
        self.background = background
        self.epsilon = epsilon
        self.debug_mode = debug_mode

    # ------------------------------------------------------------------
    # Shading
    # ------------------------------------------------------------------
    def trace(self, ray: Ray, scene: Scene, depth: int = 0) -> Vector3:
        """
        Returns the linear, unclamped color seen along ray.
        """
        if depth < 0 or depth > self.max_depth:
            raise ValueError(f"depth must be in [0, {self.max_depth}], got {depth}")

        rec = scene.nearest_hit(ray)
        if rec is None:
            return self.background

        material = rec.material
        diffuse_color = material.diffuse(rec.p)
        reflection_ratio = material.reflection(rec.p)

        color = self.direct_light(ray, rec, scene, diffuse_color, reflection_ratio)

        facing = max(0.0, -ray.direction.dot(rec.normal))
        fresnel = schlick_fresnel(reflection_ratio, facing)

        if depth < self.max_depth and reflection_ratio > 0:
            reflected = self.trace(
                Ray(rec.p + rec.normal * self.epsilon, reflect(ray.direction, rec.normal)),
                scene, depth + 1)
            if self.reflection_model == "fresnel":
                color = color + reflected * fresnel
            else:
                color = color + reflected * diffuse_color * reflection_ratio

        transparency = material.transparency()
        if depth < self.max_depth and transparency > 0:
            # Relative index: leaving the object swaps the two media.
            eta = material.ior() if rec.inside else 1.0 / material.ior()
            direction = refract(ray.direction, rec.normal, eta)
            # None means total internal reflection: nothing is transmitted.
            if direction is not None:
                refracted = self.trace(
                    Ray(rec.p - rec.normal * self.epsilon, direction),
                    scene, depth + 1)
                color = color + refracted * ((1.0 - fresnel) * transparency)

        return color

    def direct_light(self, ray: Ray, rec: HitRecord, scene: Scene,
                     diffuse_color: Vector3, reflection_ratio: float) -> Vector3:
        """
        Sums the light arriving at the hit point from every point light that
        faces the surface and is not blocked by another object.
        """
        color = Vector3.zero()
        shadow_origin = rec.p + rec.normal * self.epsilon
        for light in scene.lights:
            light_direction = light.direction_from(rec.p)
            lambert = rec.normal.dot(light_direction)
            if lambert <= 0:
                continue
            if scene.occluded(Ray(shadow_origin, light_direction)):
                continue
            color = color + light.color * diffuse_color * (lambert * (1.0 - reflection_ratio))
            if self.specular:
                half_angle = (light_direction - ray.direction).normalized()
                highlight = math.pow(max(0.0, rec.normal.dot(half_angle)), SPECULAR_EXPONENT)
                color = color + light.color * diffuse_color * (highlight * SPECULAR_WEIGHT)
        return color

    # ------------------------------------------------------------------
    # Image generation
    # ------------------------------------------------------------------
    def shade_pixel(self, scene: Scene, x: int, y: int) -> Vector3:
        """Traces the pixel's primary ray(s) and returns their average color."""
        total = Vector3.zero()
        samples = 0
        for ray in self.camera.pixel_rays(x, y, self.antialias):
            total = total + self.trace(ray, scene, 0)
            samples += 1
        return total / samples

    def render_rows(self, scene: Scene) -> Iterator[Tuple[int, np.ndarray]]:
        """
        Yields (y, row) for every image row, top to bottom. Each row is a
        (width, 3) float array of linear colors. Stopping the iteration
        abandons the render between rows.
        """
        for y in range(self.height):
            row = np.zeros((self.width, 3), dtype=np.float64)
            for x in range(self.width):
                row[x] = self.shade_pixel(scene, x, y).to_tuple()
            yield y, row

    def render(self, scene: Scene) -> np.ndarray:
        """
        Renders the whole image. Returns a (height, width, 3) float64 array of
        linear, unclamped colors in row-major order.
        """
        if self.debug_mode:
            self.describe_scene(scene)
        start = time.perf_counter()
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        report_every = max(1, self.height // 10)
        for y, row in self.render_rows(scene):
            image[y] = row
            if self.debug_mode and (y + 1) % report_every == 0:
                print(f"  Rendered {y + 1}/{self.height} rows")
        if self.debug_mode:
            print(f"Render finished in {time.perf_counter() - start:.2f}s")
        return image

    def render_frame(self, scene: Scene, tone_map: str = "gamma", gamma: float = GAMMA) -> np.ndarray:
        """
        Renders and converts to the 8-bit (height, width, 3) buffer a display
        sink expects.
        """
        if tone_map not in TONE_MAPPERS:
            raise ValueError(f"Unknown tone mapper {tone_map!r}, expected one of {TONE_MAPPERS}")
        linear = self.render(scene)
        if tone_map == "reinhard":
            return reinhard_tone_mapping(linear, gamma=gamma)
        return gamma_quantize(linear, gamma)

    def describe_scene(self, scene: Scene):
        print("\n=== Rendering Scene ===")
        print(f"Resolution: {self.width}x{self.height}, fov: {self.camera.fov}")
        print(f"Max depth: {self.max_depth}, antialias: {self.antialias}, "
              f"reflection model: {self.reflection_model}")
        print(f"Scene contains {len(scene.objects)} objects and {len(scene.lights)} lights")
        for i, obj in enumerate(scene.objects):
            print(f"    Object {i}: {obj!r} with {obj.material!r}")
        for i, light in enumerate(scene.lights):
            print(f"    Light {i}: {light!r}")

def render(scene: Scene, width: int, height: int, fov: float = 45.0, **options) -> np.ndarray:
    """
    Renders scene from the origin looking down -Z. Returns a (height, width, 3)
    array of linear colors. Extra keyword options are passed to Renderer.
    """
    return Renderer(width, height, fov, **options).render(scene)
