# materials/textures.py
import math

from pathtracer.core.vector import Vector3


class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        """Color at surface coordinates (u, v) and world point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color

    def __repr__(self) -> str:
        return f"SolidTexture({self.color!r})"


class CheckerTexture(Texture):
    """
    A 3D checker pattern: space is split into cubes of side ``scale`` that
    alternate between the two colors.
    """
    def __init__(self, even: Vector3, odd: Vector3, scale: float = 1.0):
        if scale <= 0:
            raise ValueError("checker scale must be positive")
        self.even = even if isinstance(even, Texture) else SolidTexture(even)
        self.odd = odd if isinstance(odd, Texture) else SolidTexture(odd)
        self.inv_scale = 1.0 / scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        cell = (math.floor(self.inv_scale * p.x)
                + math.floor(self.inv_scale * p.y)
                + math.floor(self.inv_scale * p.z))
        texture = self.even if cell % 2 == 0 else self.odd
        return texture.value(u, v, p)
