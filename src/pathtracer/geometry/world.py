# geometry/world.py
from typing import Iterable, List, Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.pcg import PCG32
from pathtracer.core.ray import Ray
from pathtracer.geometry.bvh import BVHNode
from pathtracer.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    An ordered list of Hittable objects, answering queries by linear scan.
    The union bounding box is kept up to date as objects are added.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = []
        self.box = AABB.empty()
        self.extend(objects)

    def add(self, obj: Hittable):
        self.box = AABB.surrounding_box(self.box, obj.bounding_box())
        self.objects.append(obj)

    def extend(self, objects: Iterable[Hittable]):
        for obj in objects:
            self.add(obj)

    def clear(self):
        self.objects.clear()
        self.box = AABB.empty()

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, rng: PCG32) -> BVHNode:
        """
        Builds a BVH over the current objects. The returned tree answers the
        same queries as this list and is meant to replace it as scene root.
        """
        return BVHNode(self.objects, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        return self.box
