"""Shared fixtures for the path tracer tests."""

import pytest

from pathtracer.config import RenderSettings
from pathtracer.core.pcg import PCG32
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.lambertian import Lambertian


class FixedRandom:
    """Stand-in generator whose ``random()`` always returns the same value."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.value

    def uniform(self, lo, hi):
        return lo + self.random() * (hi - lo)


@pytest.fixture
def rng():
    return PCG32(42, 54)


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def gray():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def make_record():
    """Build a HitRecord at the origin with a given normal and facing."""

    def _make(normal=Vector3(0.0, 0.0, 1.0), front_face=True, material=None):
        return HitRecord(p=Vector3(0.0, 0.0, 0.0), normal=normal, t=1.0,
                         front_face=front_face, material=material)

    return _make


@pytest.fixture
def small_settings():
    """A render small enough to run in well under a second per call."""
    return RenderSettings(image_width=12, aspect_ratio=2.0, samples_per_pixel=3, max_depth=6)
