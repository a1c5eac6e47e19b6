# core/aabb.py
import math
from typing import Optional, Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


class AABB:
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    @classmethod
    def empty(cls) -> "AABB":
        # Inverted bounds: the union with any box is that box.
        return cls(Vector3(math.inf, math.inf, math.inf),
                   Vector3(-math.inf, -math.inf, -math.inf))

    @classmethod
    def from_points(cls, a: Vector3, b: Vector3) -> "AABB":
        return cls(Vector3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z)),
                   Vector3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z)))

    def is_empty(self) -> bool:
        return any(self.minimum[a] > self.maximum[a] for a in range(3))

    def axis_interval(self, axis: int) -> Tuple[float, float]:
        return self.minimum[axis], self.maximum[axis]

    def intersect(self, ray: Ray, t_min: float, t_max: float) -> Optional[Tuple[float, float]]:
        """
        Slab test. Returns the (t_min, t_max) interval narrowed to the part
        of the ray inside the box, or None on a miss. Touching intervals
        count as a miss.
        """
        for a in range(3):
            d = ray.direction[a]
            # Python raises on float division by zero, IEEE gives a signed infinity.
            inv_d = 1.0 / d if d != 0.0 else math.copysign(math.inf, d)
            origin = ray.origin[a]
            t0 = (self.minimum[a] - origin) * inv_d
            t1 = (self.maximum[a] - origin) * inv_d
            if inv_d < 0:
                t0, t1 = t1, t0
            # NaN (0 * inf) fails both comparisons and leaves the bound alone.
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return None
        return t_min, t_max

    def hit(self, ray: Ray, t_min: float, t_max: float) -> bool:
        return self.intersect(ray, t_min, t_max) is not None

    def surface_area(self) -> float:
        if self.is_empty():
            return 0.0
        d = self.maximum - self.minimum
        return 2 * (d.x * d.y + d.x * d.z + d.y * d.z)

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
