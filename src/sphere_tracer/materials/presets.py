# materials/presets.py
from sphere_tracer.core.vector import Vector3
from sphere_tracer.materials.solid import Solid
from sphere_tracer.materials.shiny import Shiny
from sphere_tracer.materials.glass import Glass
from sphere_tracer.materials.checkerboard import CheckerBoard

class ColorPresets:
    """Common color presets for materials."""

    # Warm colors
    RED = Vector3(0.9, 0.2, 0.2)
    ROSE = Vector3(0.8, 0.5, 0.5)
    ORANGE = Vector3(0.9, 0.6, 0.1)

    # Cool colors
    SKY = Vector3(0.6, 0.8, 1.0)
    TEAL = Vector3(0.3, 0.8, 0.8)
    STEEL = Vector3(0.3, 0.5, 0.8)

    # Neutral colors
    WHITE = Vector3(1.0, 1.0, 1.0)
    LIGHT_GRAY = Vector3(0.8, 0.8, 0.8)
    SMOKE = Vector3(0.1, 0.1, 0.1)
    BLACK = Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def matte(color: Vector3) -> Solid:
        """Create a non-reflective material with the given color."""
        return Solid(color)

class MirrorPresets:
    """Reflective materials with different amounts of mirror."""

    @staticmethod
    def shiny() -> Shiny:
        return Shiny()

    @staticmethod
    def polished(color: Vector3) -> Solid:
        return Solid(color, reflection=0.5)

    @staticmethod
    def glossy(color: Vector3) -> Solid:
        return Solid(color, reflection=0.2)

class DielectricPresets:
    """Transparent materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Glass:
        return Glass(ior=1.5)

    @staticmethod
    def crown_glass() -> Glass:
        return Glass(ior=1.52)

    @staticmethod
    def water() -> Glass:
        return Glass(ColorPresets.BLACK, reflection=0.1, transparency=0.9, ior=1.33)

    @staticmethod
    def diamond() -> Glass:
        return Glass(ColorPresets.BLACK, reflection=0.2, transparency=0.8, ior=2.42)

class GroundPresets:
    """Materials for the ground sphere."""

    @staticmethod
    def checkerboard(reflection: float = 0.6) -> CheckerBoard:
        return CheckerBoard(reflection=reflection)

    @staticmethod
    def soft_checkerboard() -> CheckerBoard:
        """Dimmer tiles with no mirror component."""
        return CheckerBoard(reflection=0.0, white=ColorPresets.LIGHT_GRAY,
                            black=ColorPresets.SMOKE)
