# materials/material.py
from typing import Optional, Tuple, Union

from pathtracer.core.pcg import PCG32
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.textures import SolidTexture, Texture


class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials are immutable once built and may be shared by any number of
    primitives.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng: PCG32) -> Optional[Tuple[Ray, Vector3]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation), or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")


def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    if isinstance(albedo, Texture):
        return albedo
    return SolidTexture(albedo)
