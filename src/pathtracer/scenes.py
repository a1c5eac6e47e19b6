# scenes.py
"""
Demo scenes. Each builder returns a HittableList; ``SCENES`` pairs it with
the camera pose that frames it.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict

from pathtracer.core.pcg import PCG32
from pathtracer.core.utils import random_vector
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.presets import ColorPresets, DielectricPresets, MetalPresets


def two_spheres(rng: PCG32 = None) -> HittableList:
    """A diffuse sphere resting on a large ground sphere."""
    world = HittableList()
    world.add(Sphere(Vector3(0.0, -100.5, -1.0), 100.0, Lambertian(Vector3(0.5, 0.5, 0.5))))
    world.add(Sphere(Vector3(0.0, 0.0, -1.0), 0.5, Lambertian(ColorPresets.RED)))
    return world


def material_showcase(rng: PCG32 = None) -> HittableList:
    """Diffuse, hollow glass and metal spheres side by side."""
    ground = ColorPresets.checkered()
    center = Lambertian(ColorPresets.BLUE)
    glass = DielectricPresets.glass()
    gold = MetalPresets.gold()

    world = HittableList()
    world.add(Sphere(Vector3(0.0, -100.5, -1.0), 100.0, ground))
    world.add(Sphere(Vector3(0.0, 0.0, -1.0), 0.5, center))
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), 0.5, glass))
    # Negative radius: the inner surface of the glass shell.
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), -0.45, glass))
    world.add(Sphere(Vector3(1.0, 0.0, -1.0), 0.5, gold))
    return world


def random_spheres(rng: PCG32 = None) -> HittableList:
    """A grid of small randomly placed spheres around three large ones."""
    if rng is None:
        rng = PCG32(2023, 1)

    world = HittableList()
    world.add(Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, Lambertian(ColorPresets.GRAY)))

    clearance = Vector3(4.0, 0.2, 0.0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - clearance).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = random_vector(rng) * random_vector(rng)
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                albedo = random_vector(rng, 0.5, 1.0)
                material = Metal(albedo, rng.uniform(0.0, 0.5))
            else:
                material = DielectricPresets.glass()
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vector3(0.0, 1.0, 0.0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-4.0, 1.0, 0.0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4.0, 1.0, 0.0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))
    return world


@dataclass(frozen=True)
class SceneEntry:
    build: Callable[[PCG32], HittableList]
    camera: Dict[str, Any] = field(default_factory=dict)
    description: str = ""


_SHOWCASE_FROM = Vector3(3.0, 3.0, 2.0)
_SHOWCASE_AT = Vector3(0.0, 0.0, -1.0)

SCENES: Dict[str, SceneEntry] = {
    "two_spheres": SceneEntry(
        two_spheres,
        {"look_from": Vector3(0.0, 0.0, 0.0), "look_at": Vector3(0.0, 0.0, -1.0),
         "vfov": 90.0, "aperture": 0.0, "focus_distance": 1.0},
        "ground sphere and one diffuse sphere",
    ),
    "showcase": SceneEntry(
        material_showcase,
        {"look_from": _SHOWCASE_FROM, "look_at": _SHOWCASE_AT,
         "vfov": 20.0, "aperture": 0.5,
         "focus_distance": (_SHOWCASE_FROM - _SHOWCASE_AT).length()},
        "diffuse, glass and metal spheres with depth of field",
    ),
    "random_spheres": SceneEntry(
        random_spheres,
        {"look_from": Vector3(13.0, 2.0, 3.0), "look_at": Vector3(0.0, 0.0, 0.0),
         "vfov": 20.0, "aperture": 0.1, "focus_distance": 10.0},
        "several hundred small spheres around three large ones",
    ),
}


def get_scene(name: str) -> SceneEntry:
    try:
        return SCENES[name]
    except KeyError:
        raise KeyError(f"unknown scene {name!r}; choose from {sorted(SCENES)}") from None
