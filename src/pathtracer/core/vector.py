# core/vector.py
import math
from typing import Iterator, Union

Scalar = Union[int, float]


class Vector3:
    """
    A 3D vector used for points, directions and RGB colors alike.

    Supports component-wise arithmetic against other vectors and scalars,
    dot and cross products, and normalization.
    """
    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    @staticmethod
    def zero() -> "Vector3":
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def one() -> "Vector3":
        return Vector3(1.0, 1.0, 1.0)

    def __add__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x + other, self.y + other, self.z + other)
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __radd__(self, other: Scalar) -> "Vector3":
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x - other, self.y - other, self.z - other)
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __rsub__(self, other: Scalar) -> "Vector3":
        return Vector3(other - self.x, other - self.y, other - self.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: Scalar) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __getitem__(self, axis: int) -> float:
        if axis == 0:
            return self.x
        if axis == 1:
            return self.y
        if axis == 2:
            return self.z
        raise IndexError(f"Vector3 axis out of range: {axis}")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        # Zero-length input is a caller error and raises ZeroDivisionError.
        return self / self.length()

    def near_zero(self, eps: float = 1e-8) -> bool:
        return abs(self.x) < eps and abs(self.y) < eps and abs(self.z) < eps

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
