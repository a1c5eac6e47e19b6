# materials/metal.py
from typing import Optional, Tuple

from pathtracer.core.pcg import PCG32
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_sphere, reflect
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material


class Metal(Material):
    """
    Metal material: mirror reflection blurred by ``fuzz`` (0 is a perfect
    mirror, values above 1 are clamped).
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = min(fuzz, 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: PCG32) -> Optional[Tuple[Ray, Vector3]]:
        incident = ray_in.direction
        if incident.dot(rec.normal) >= 0:
            # Arrived from behind the surface.
            return None
        reflected = reflect(incident, rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz)
        return scattered, self.albedo

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
