# core/vector.py
import math
from typing import Iterator, Union

from pathtracer.errors import DegenerateVectorError

NEAR_ZERO_EPSILON = 1e-8


class Vector3:
    """
    A 3D vector used for points, directions and linear RGB colors.

    Vectors are treated as values: every operation returns a new vector and
    none of them mutate the operands.
    """
    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return self.inverse()

    def __mul__(self, other: Union["Vector3", float]) -> "Vector3":
        # Component-wise product for colors, scaling otherwise.
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return self * (1.0 / t)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def unit_vector(self) -> "Vector3":
        """
        Returns this vector scaled to length 1.

        Raises DegenerateVectorError for the zero vector instead of producing
        NaN components.
        """
        l = self.length()
        if l == 0:
            raise DegenerateVectorError(f"cannot normalize zero-length {self!r}")
        return self / l

    def inverse(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def near_zero(self) -> bool:
        """
        True if every component is within 1e-8 of zero.
        """
        return (abs(self.x) < NEAR_ZERO_EPSILON and
                abs(self.y) < NEAR_ZERO_EPSILON and
                abs(self.z) < NEAR_ZERO_EPSILON)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
