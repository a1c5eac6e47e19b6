# core/utils.py
from pathtracer.core.pcg import PCG32
from pathtracer.core.vector import Vector3


def random_vector(rng: PCG32, lo: float = 0.0, hi: float = 1.0) -> Vector3:
    """
    Returns a vector with each component drawn uniformly from [lo, hi).
    """
    return Vector3(rng.uniform(lo, hi), rng.uniform(lo, hi), rng.uniform(lo, hi))


def random_in_unit_sphere(rng: PCG32) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = random_vector(rng, -1.0, 1.0)
        if p.length_squared() < 1.0:
            return p


def random_unit_vector(rng: PCG32) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()


def random_in_unit_disk(rng: PCG32) -> Vector3:
    """
    Returns a random point (x, y, 0) inside the unit disk, drawn from the
    [0, 1) quadrant.
    """
    while True:
        p = Vector3(rng.random(), rng.random(), 0.0)
        if p.length_squared() < 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * (2.0 * v.dot(n))
