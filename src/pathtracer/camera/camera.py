# camera/camera.py
import math

from pathtracer.core.pcg import PCG32
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk
from pathtracer.core.vector import Vector3


class Camera:
    """
    Thin-lens camera. ``vfov`` is the vertical field of view in degrees.
    Geometry at ``focus_dist`` is sharp; everything else blurs in
    proportion to ``aperture``.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0):
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0

        theta = math.radians(vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = self.aspect_ratio * viewport_height

        # Orthonormal basis; the camera looks down -w.
        self.w = (look_from - look_at).normalize()
        self.u = vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = look_from
        self.horizontal = self.u * (focus_dist * viewport_width)
        self.vertical = self.v * (focus_dist * viewport_height)
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * focus_dist)

    @classmethod
    def from_settings(cls, settings) -> "Camera":
        return cls(settings.look_from, settings.look_at, settings.vup,
                   settings.vfov, settings.aspect_ratio,
                   settings.aperture, settings.focus_distance)

    def get_ray(self, s: float, t: float, rng: PCG32) -> Ray:
        """
        Ray through image-plane position (s, t), both in [0, 1] from the
        lower-left corner, starting from a random point on the lens.
        """
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        return Ray(ray_origin, ray_direction)
