from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable, HitRecord
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList

__all__ = ["BVHNode", "Hittable", "HitRecord", "HittableList", "Sphere"]
