# camera/camera.py
import math
from typing import Iterator
from sphere_tracer.core.vector import Vector3
from sphere_tracer.core.matrix import Matrix3
from sphere_tracer.core.ray import Ray

# Sub-pixel offsets used when antialiasing: a 2x2 grid inside each pixel.
SUBPIXEL_OFFSETS = ((0.0, 0.0), (0.5, 0.0), (0.0, 0.5), (0.5, 0.5))

class Camera:
    """
    Pinhole camera. The eye sits at ``position`` and looks down -Z through a
    screen plane at z = -1; yaw (about Y) and pitch (about X) rotate that
    frame. fov is the vertical field of view in degrees.
    """
    def __init__(self, width: int, height: int, fov: float = 45.0,
                 position: Vector3 = None, yaw: float = 0.0, pitch: float = 0.0):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if not 0.0 < fov < 180.0:
            raise ValueError(f"fov must be in (0, 180) degrees, got {fov}")
        self.width = width
        self.height = height
        self.fov = fov
        self.position = position if position is not None else Vector3.zero()
        self.yaw = yaw
        self.pitch = pitch
        self.update_camera()

    def update_camera(self):
        """Recomputes the screen plane extents and the orientation matrix."""
        self.screen_height = math.tan(math.radians(self.fov) / 2) * 2
        self.screen_width = self.screen_height * self.width / self.height
        self.orientation = Matrix3.rotation_x(self.pitch) * Matrix3.rotation_y(self.yaw)
        self.oriented = self.yaw != 0.0 or self.pitch != 0.0

    def direction(self, x: float, y: float) -> Vector3:
        """Unit direction through image coordinate (x, y); y grows downward."""
        d = Vector3((x - self.width / 2) / self.width * self.screen_width,
                    (self.height / 2 - y) / self.height * self.screen_height,
                    -1.0)
        if self.oriented:
            d = d * self.orientation
        return d.normalized()

    def get_ray(self, x: float, y: float) -> Ray:
        return Ray(self.position, self.direction(x, y))

    def pixel_rays(self, x: int, y: int, antialias: bool = False) -> Iterator[Ray]:
        """Yields one ray for the pixel, or four on a 2x2 grid when antialiasing."""
        if not antialias:
            yield self.get_ray(x, y)
            return
        for dx, dy in SUBPIXEL_OFFSETS:
            yield self.get_ray(x + dx, y + dy)

    def __repr__(self) -> str:
        return (f"Camera({self.width}x{self.height}, fov={self.fov}, "
                f"position={self.position!r}, yaw={self.yaw}, pitch={self.pitch})")
