# materials/lambertian.py
from typing import Tuple, Union

from pathtracer.core.pcg import PCG32
from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_unit_vector
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material, as_texture
from pathtracer.materials.textures import Texture

# Squared length below which a scatter direction counts as degenerate.
DEGENERATE_LENGTH_SQUARED = 1e-16


class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Vector3, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: PCG32) -> Tuple[Ray, Vector3]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Diffuse surfaces always scatter, so the result is never None.
        """
        scatter_direction = rec.normal + random_unit_vector(rng)

        # The random vector can nearly cancel the normal.
        if scatter_direction.length_squared() < DEGENERATE_LENGTH_SQUARED:
            scatter_direction = rec.normal

        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return Ray(rec.p, scatter_direction), attenuation

    def __repr__(self) -> str:
        return f"Lambertian({self.texture!r})"
