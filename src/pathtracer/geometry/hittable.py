# geometry/hittable.py
from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0.0, front_face: bool = True, material=None,
                 u: float = 0.0, v: float = 0.0):
        self.p = p              # Intersection point
        self.normal = normal    # Unit normal, facing against the ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the hit was on the outward side
        self.material = material
        self.u = u              # Surface texture coordinates
        self.v = v

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, "
                f"front_face={self.front_face})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    ``hit`` returns the nearest intersection whose parameter lies strictly
    inside ``(t_min, t_max)``, or None.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> AABB:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
