import math
import numpy as np
import pytest
from sphere_tracer.core.vector import Vector3
from sphere_tracer.core.ray import Ray
from sphere_tracer.core.utils import reflect, refract, schlick_fresnel
from sphere_tracer.camera.camera import Camera
from sphere_tracer.geometry.scene import Scene
from sphere_tracer.geometry.sphere import Sphere
from sphere_tracer.geometry.light import Light
from sphere_tracer.materials.solid import Solid
from sphere_tracer.materials.shiny import Shiny
from sphere_tracer.materials.glass import Glass
from sphere_tracer.renderer.raytracer import Renderer, render, BACKGROUND, MAX_DEPTH
from sphere_tracer.scenes import create_world

WHITE = Vector3(1, 1, 1)
BLACK = Vector3(0, 0, 0)
ABOVE_GROUND = Vector3(0, 5, 0)
DOWN = Vector3(0, -1, 0)


class RecordingRenderer(Renderer):
    """Remembers the depth of every trace() call."""
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.depths = []

    def trace(self, ray, scene, depth=0):
        self.depths.append(depth)
        return super().trace(ray, scene, depth)


def ground_scene(light_position=Vector3(0, 20, 0)):
    """A huge white ground sphere whose top touches y = 0, lit from above."""
    scene = Scene()
    scene.add(Sphere(Vector3(0, -10000, 0), 10000, Solid(WHITE)))
    scene.add_light(Light(light_position, WHITE))
    return scene


def assert_color(actual, expected, abs_tol=1e-9):
    assert actual.isclose(expected, abs_tol), f"{actual!r} != {expected!r}"


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------

def test_reflect():
    assert reflect(Vector3(1, -1, 0), Vector3(0, 1, 0)) == Vector3(1, 1, 0)


def test_refract_straight_through():
    d = refract(Vector3(0, -1, 0), Vector3(0, 1, 0), 1 / 1.5)
    assert d.isclose(Vector3(0, -1, 0))


def test_refract_total_internal_reflection():
    grazing = Vector3(1, -0.1, 0).normalized()
    assert refract(grazing, Vector3(0, 1, 0), 1.5) is None


def test_schlick_fresnel():
    assert schlick_fresnel(0.3, 1.0) == pytest.approx(0.3)
    assert schlick_fresnel(0.3, 0.0) == pytest.approx(1.0)
    assert schlick_fresnel(0.0, 0.5) == pytest.approx(0.5 ** 5)


# ----------------------------------------------------------------------
# Direct light and shadows
# ----------------------------------------------------------------------

def test_miss_returns_background():
    renderer = Renderer(4, 4)
    assert renderer.trace(Ray(ABOVE_GROUND, Vector3(0, 1, 0)), ground_scene()) == BACKGROUND


def test_custom_background():
    sky = Vector3(0.2, 0.4, 0.8)
    renderer = Renderer(4, 4, background=sky)
    assert renderer.trace(Ray(ABOVE_GROUND, Vector3(0, 1, 0)), Scene()) == sky


def test_unobstructed_ground_is_fully_lit():
    renderer = Renderer(4, 4, specular=False)
    color = renderer.trace(Ray(ABOVE_GROUND, DOWN), ground_scene())
    assert_color(color, WHITE)


def test_specular_highlight_adds_to_direct_light():
    renderer = Renderer(4, 4, specular=True)
    color = renderer.trace(Ray(ABOVE_GROUND, DOWN), ground_scene())
    # Head-on view with the light straight above: n.h == 1
    assert_color(color, WHITE * 1.5)


def test_interposed_sphere_casts_a_shadow():
    scene = ground_scene()
    scene.add(Sphere(Vector3(0, 10, 0), 1, Solid(WHITE)))
    renderer = Renderer(4, 4)
    color = renderer.trace(Ray(ABOVE_GROUND, DOWN), scene)
    assert_color(color, BLACK)


def test_light_behind_surface_contributes_nothing():
    scene = ground_scene(light_position=Vector3(0, -50, 0))
    renderer = Renderer(4, 4)
    color = renderer.trace(Ray(ABOVE_GROUND, DOWN), scene)
    assert_color(color, BLACK)


def test_light_at_an_angle_follows_lambert():
    scene = ground_scene(light_position=Vector3(20, 20, 0))
    renderer = Renderer(4, 4, specular=False)
    color = renderer.trace(Ray(ABOVE_GROUND, DOWN), scene)
    assert_color(color, WHITE * (1 / 2 ** 0.5))


def test_light_color_and_diffuse_multiply():
    scene = Scene()
    scene.add(Sphere(Vector3(0, -10000, 0), 10000, Solid(Vector3(0.5, 1.0, 0.0))))
    scene.add_light(Light(Vector3(0, 20, 0), Vector3(2, 0.5, 3)))
    color = Renderer(4, 4, specular=False).trace(Ray(ABOVE_GROUND, DOWN), scene)
    assert_color(color, Vector3(1.0, 0.5, 0.0))


def test_lights_add_up():
    scene = ground_scene()
    scene.add_light(Light(Vector3(0, 30, 0), WHITE))
    color = Renderer(4, 4, specular=False).trace(Ray(ABOVE_GROUND, DOWN), scene)
    assert_color(color, WHITE * 2)


# ----------------------------------------------------------------------
# Recursion
# ----------------------------------------------------------------------

def test_non_reflective_surface_issues_no_secondary_rays():
    renderer = RecordingRenderer(4, 4)
    renderer.trace(Ray(ABOVE_GROUND, DOWN), ground_scene())
    assert renderer.depths == [0]


def facing_mirrors():
    scene = Scene()
    scene.add(Sphere(Vector3(0, 0, -10), 2, Shiny(reflection=1.0)))
    scene.add(Sphere(Vector3(0, 0, 10), 2, Shiny(reflection=1.0)))
    return scene


@pytest.mark.parametrize("max_depth", [0, 1, 3, MAX_DEPTH])
def test_recursion_is_bounded_by_max_depth(max_depth):
    renderer = RecordingRenderer(4, 4, max_depth=max_depth)
    renderer.trace(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), facing_mirrors())
    assert max(renderer.depths) == max_depth
    assert renderer.depths == list(range(max_depth + 1))


@pytest.mark.parametrize("max_depth", [1, 3, MAX_DEPTH])
def test_branching_glass_recursion_is_bounded_by_max_depth(max_depth):
    scene = Scene()
    scene.add(Sphere(Vector3(0, 0, -5), 1, Glass()))
    renderer = RecordingRenderer(4, 4, max_depth=max_depth)
    color = renderer.trace(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), scene)
    # Reflection and refraction both spawn rays, so the call tree branches
    assert max(renderer.depths) == max_depth
    assert set(renderer.depths) == set(range(max_depth + 1))
    assert len(renderer.depths) > max_depth + 1
    assert all(math.isfinite(c) for c in color)


def test_depth_outside_budget_is_rejected():
    renderer = Renderer(4, 4, max_depth=2)
    ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
    with pytest.raises(ValueError):
        renderer.trace(ray, Scene(), 3)
    with pytest.raises(ValueError):
        renderer.trace(ray, Scene(), -1)


def mirror_and_white_wall():
    """A mirror ahead of the eye reflecting a lit white sphere behind it."""
    scene = Scene()
    scene.add(Sphere(Vector3(0, 0, -10), 2, Shiny()))
    scene.add(Sphere(Vector3(0, 0, 20), 5, Solid(WHITE)))
    scene.add_light(Light(Vector3(0, 8, 5), WHITE))
    return scene


def test_mirror_shows_reflection():
    scene = mirror_and_white_wall()
    ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
    with_reflection = Renderer(4, 4, max_depth=1).trace(ray, scene)
    without = Renderer(4, 4, max_depth=0).trace(ray, scene)
    assert with_reflection.x > without.x


def test_reflection_models_differ_by_diffuse_weighting():
    scene = mirror_and_white_wall()
    ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
    fresnel = Renderer(4, 4, reflection_model="fresnel").trace(ray, scene)
    ratio = Renderer(4, 4, reflection_model="ratio").trace(ray, scene)
    # Head-on, the Fresnel weight equals the reflection ratio, so the two
    # models only differ by the mirror's diffuse color (0.6, 0.8, 1.0).
    assert fresnel.z == pytest.approx(ratio.z)
    assert fresnel.x > ratio.x
    assert fresnel.y > ratio.y


def test_unknown_reflection_model_is_rejected():
    with pytest.raises(ValueError):
        Renderer(4, 4, reflection_model="mirror")


@pytest.mark.parametrize("width, height, fov", [
    (8, 6, 45),
    (4, 4, 45),
    (4, 3, 60),
])
def test_camera_that_disagrees_with_image_settings_is_rejected(width, height, fov):
    camera = Camera(4, 3, 45)
    with pytest.raises(ValueError):
        Renderer(width, height, fov, camera=camera)


def test_matching_camera_is_used():
    camera = Camera(4, 3, 60, position=Vector3(1, 2, 3))
    renderer = Renderer(4, 3, 60, camera=camera)
    assert renderer.camera is camera
    assert (renderer.width, renderer.height) == (4, 3)
    assert renderer.render(Scene()).shape == (3, 4, 3)


@pytest.mark.parametrize("kwargs", [{"max_depth": -1}, {"epsilon": 0}])
def test_invalid_renderer_options(kwargs):
    with pytest.raises(ValueError):
        Renderer(4, 4, **kwargs)


# ----------------------------------------------------------------------
# Refraction
# ----------------------------------------------------------------------

def glass_ball():
    scene = Scene()
    scene.add(Sphere(Vector3(0, 0, 0), 1, Glass(reflection=0.0)))
    return scene


def test_head_on_ray_is_refracted_out_of_glass():
    renderer = RecordingRenderer(4, 4)
    renderer.trace(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)), glass_ball())
    assert renderer.depths == [0, 1]


def test_total_internal_reflection_suppresses_refraction():
    renderer = RecordingRenderer(4, 4)
    # Starts inside near the top and hits the wall at a grazing angle:
    # sin^2 of the transmitted angle is 0.9025 * 1.5^2 > 1.
    renderer.trace(Ray(Vector3(0, 0.95, 0), Vector3(1, 0, 0)), glass_ball())
    assert renderer.depths == [0]


def test_refraction_carries_color_through_glass():
    scene = Scene()
    scene.add(Sphere(Vector3(0, 0, -5), 1, Glass(reflection=0.0, transparency=1.0)))
    scene.add(Sphere(Vector3(0, 0, -20), 2, Solid(WHITE)))
    scene.add_light(Light(Vector3(0, 0, 0), WHITE))
    renderer = Renderer(4, 4, specular=False)
    color = renderer.trace(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), scene)
    # The white sphere is in the glass ball's shadow, and the glass itself
    # is lit but has a dark tint, so only the tint survives.
    assert color.x == pytest.approx(0.1)


# ----------------------------------------------------------------------
# Images
# ----------------------------------------------------------------------

def test_render_shape_and_values():
    image = render(create_world(), 8, 6, 45)
    assert image.shape == (6, 8, 3)
    assert image.dtype == np.float64
    assert np.isfinite(image).all()
    assert (image >= 0).all()
    assert image.max() > 0


def test_render_is_deterministic_and_leaves_scene_untouched():
    scene = create_world()
    objects = list(scene.objects)
    first = render(scene, 6, 4, 45)
    second = render(scene, 6, 4, 45)
    np.testing.assert_array_equal(first, second)
    assert scene.objects == objects


def test_render_matches_trace_row_major():
    scene = create_world()
    renderer = Renderer(5, 3, 45)
    image = renderer.render(scene)
    for y in range(3):
        for x in range(5):
            expected = renderer.trace(renderer.camera.get_ray(x, y), scene)
            np.testing.assert_allclose(image[y, x], expected.to_tuple())


def test_antialias_averages_four_samples():
    scene = create_world()
    renderer = Renderer(4, 4, 45, antialias=True)
    expected = Vector3.zero()
    for ray in renderer.camera.pixel_rays(2, 3, antialias=True):
        expected = expected + renderer.trace(ray, scene)
    assert renderer.shade_pixel(scene, 2, 3).isclose(expected / 4)


def test_render_rows_can_be_abandoned():
    rows = Renderer(4, 10).render_rows(create_world())
    y, row = next(rows)
    assert y == 0
    assert row.shape == (4, 3)
    rows.close()


def test_render_frame_is_8_bit():
    frame = Renderer(6, 4, 45, antialias=True).render_frame(create_world())
    assert frame.shape == (4, 6, 3)
    assert frame.dtype == np.uint8
    reinhard = Renderer(6, 4, 45).render_frame(create_world(), tone_map="reinhard")
    assert reinhard.dtype == np.uint8
    with pytest.raises(ValueError):
        Renderer(6, 4).render_frame(create_world(), tone_map="filmic")


def test_debug_mode_prints_scene_summary(capsys):
    Renderer(2, 2, debug_mode=True).render(create_world())
    out = capsys.readouterr().out
    assert "=== Rendering Scene ===" in out
    assert "Render finished" in out
