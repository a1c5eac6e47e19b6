# materials/presets.py
from pathtracer.core.vector import Vector3
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.textures import CheckerTexture


class MetalPresets:
    """Metals used by the demo scenes."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Vector3(0.8, 0.6, 0.2), fuzz=0.0)


class DielectricPresets:
    """Dielectrics used by the demo scenes."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)


class ColorPresets:
    """Albedo colors shared by the demo scenes."""

    RED = Vector3(0.7, 0.3, 0.3)
    BLUE = Vector3(0.1, 0.2, 0.5)
    WHITE = Vector3(0.9, 0.9, 0.9)
    GRAY = Vector3(0.5, 0.5, 0.5)

    @staticmethod
    def checkered(even: Vector3 = None, odd: Vector3 = None, scale: float = 0.32) -> Lambertian:
        """Matte material with a 3D checker pattern."""
        if even is None:
            even = Vector3(0.2, 0.3, 0.1)
        if odd is None:
            odd = ColorPresets.WHITE
        return Lambertian(CheckerTexture(even, odd, scale))
