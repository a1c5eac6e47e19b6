# geometry/bvh.py
from typing import Optional, Sequence

from pathtracer.core.aabb import AABB
from pathtracer.core.pcg import PCG32
from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import Hittable, HitRecord


class BVHNode(Hittable):
    """
    Binary bounding volume hierarchy over a fixed set of Hittables.

    Each level sorts its objects by bounding-box minimum along an axis
    picked at random and splits them in half. A single object becomes a
    leaf whose two children are the same object.
    """
    def __init__(self, objects: Sequence[Hittable], rng: PCG32):
        if not objects:
            raise ValueError("cannot build a BVH over an empty object list")

        axis = rng.randint(0, 3)

        def box_min(obj: Hittable) -> float:
            return obj.bounding_box().minimum[axis]

        object_span = len(objects)
        if object_span == 1:
            self.left = self.right = objects[0]
        elif object_span == 2:
            if box_min(objects[0]) < box_min(objects[1]):
                self.left, self.right = objects[0], objects[1]
            else:
                self.left, self.right = objects[1], objects[0]
        else:
            ordered = sorted(objects, key=box_min)
            mid = object_span // 2
            self.left = BVHNode(ordered[:mid], rng)
            self.right = BVHNode(ordered[mid:], rng)

        self.box = AABB.surrounding_box(self.left.bounding_box(), self.right.bounding_box())

    @property
    def is_leaf(self) -> bool:
        return self.left is self.right

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        left_rec = self.left.hit(ray, t_min, t_max)
        if left_rec is None:
            return self.right.hit(ray, t_min, t_max)
        right_rec = self.right.hit(ray, t_min, left_rec.t)
        return right_rec if right_rec is not None else left_rec

    def bounding_box(self) -> AABB:
        return self.box

    def depth(self) -> int:
        """Number of node levels below and including this one."""
        children = [c for c in (self.left, self.right) if isinstance(c, BVHNode)]
        return 1 + max((c.depth() for c in children), default=0)
