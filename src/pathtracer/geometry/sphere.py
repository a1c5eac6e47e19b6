# geometry/sphere.py
import math
from typing import Optional, Tuple

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A negative radius keeps the same surface but flips the outward normal,
    which is how hollow glass shells are modelled.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if radius == 0:
            raise ValueError("sphere radius must be non-zero")
        self.center = center
        self.radius = radius
        self.material = material
        self.box = AABB.from_points(center - radius, center + radius)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root strictly inside (t_min, t_max)
        root = (-half_b - sqrt_disc) / a
        if root <= t_min or root >= t_max:
            root = (-half_b + sqrt_disc) / a
            if root <= t_min or root >= t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        return self.box

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius})"


def sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Maps a point on the unit sphere to texture coordinates in [0, 1]:
    u is the angle around the Y axis from X=-1, v the angle from Y=-1 to Y=+1.
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi
