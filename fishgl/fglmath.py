"""Small value types and helpers used by the rasteriser."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple


def _lesser(a, b):
    return a if a < b else b


def _greater(a, b):
    return b if a < b else a


def _bswap16(value: int) -> int:
    return ((value & 0xFF) << 8) | ((value >> 8) & 0xFF)


@dataclass(frozen=True)
class Vec2:
    """A 2D float vector."""

    x: float = 0.0
    y: float = 0.0

    def min(self, other: Vec2) -> Vec2:
        """Component-wise minimum."""
        return Vec2(_lesser(self.x, other.x), _lesser(self.y, other.y))

    def max(self, other: Vec2) -> Vec2:
        """Component-wise maximum."""
        return Vec2(_greater(self.x, other.x), _greater(self.y, other.y))


@dataclass(frozen=True)
class Vec2i:
    """A 2D integer vector."""

    x: int = 0
    y: int = 0

    def min(self, other: Vec2i) -> Vec2i:
        """Component-wise minimum."""
        return Vec2i(_lesser(self.x, other.x), _lesser(self.y, other.y))

    def max(self, other: Vec2i) -> Vec2i:
        """Component-wise maximum."""
        return Vec2i(_greater(self.x, other.x), _greater(self.y, other.y))


@dataclass(frozen=True)
class Vec3:
    """A 3D float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, factor: float) -> Vec3:
        """Every component multiplied by factor."""
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; raises ValueError for a zero vector."""
        n = self.length()
        if n == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vec3(self.x / n, self.y / n, self.z / n)

    def cross(self, other: Vec3) -> Vec3:
        """Cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


@dataclass(frozen=True)
class BBox:
    """An integer screen-space rectangle given by its min and max corners."""

    min: Vec2i
    max: Vec2i

    def union(self, other: BBox) -> BBox:
        """Smallest rectangle covering both rectangles."""
        return BBox(self.min.min(other.min), self.max.max(other.max))


@dataclass(frozen=True)
class Color:
    """An RGB565 colour stored byte-swapped, ready for the display bus."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFF:
            raise ValueError(f"colour value out of 16-bit range: {self.value}")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Pack 8-bit channels into a byte-swapped RGB565 colour."""
        packed = (((r & 0xFF) >> 3) << 11) | (((g & 0xFF) >> 2) << 5) | ((b & 0xFF) >> 3)
        return cls(_bswap16(packed))

    def to_rgb(self) -> Tuple[int, int, int]:
        """Unpack to 8-bit channels; the dropped low bits come back as zero."""
        packed = _bswap16(self.value)
        return (
            ((packed >> 11) & 0x1F) << 3,
            ((packed >> 5) & 0x3F) << 2,
            (packed & 0x1F) << 3,
        )


def vary(a: float, b: float, c: float, bary: Vec3) -> float:
    """Interpolate three per-vertex values with barycentric weights."""
    return a * bary.x + b * bary.y + c * bary.z


def bounding_rect(a: Vec3, b: Vec3, c: Vec3) -> Tuple[Vec2, Vec2]:
    """Float bounding rectangle of a triangle as (min, max)."""
    low = Vec2(_lesser(_lesser(a.x, b.x), c.x), _lesser(_lesser(a.y, b.y), c.y))
    high = Vec2(_greater(_greater(a.x, b.x), c.x), _greater(_greater(a.y, b.y), c.y))
    return low, high


def bounding_rect_int(a: Vec3, b: Vec3, c: Vec3) -> Tuple[Vec2i, Vec2i]:
    """Integer bounding rectangle of a triangle; coordinates truncate toward zero."""
    ax, ay, bx, by, cx, cy = (int(v) for v in (a.x, a.y, b.x, b.y, c.x, c.y))
    low = Vec2i(_lesser(_lesser(ax, bx), cx), _lesser(_lesser(ay, by), cy))
    high = Vec2i(_greater(_greater(ax, bx), cx), _greater(_greater(ay, by), cy))
    return low, high


def mat3_mul_vec3(mat: Sequence[Vec3], vec: Vec3) -> Vec3:
    """Product of a 3x3 matrix given as three row vectors and a column vector."""
    r1, r2, r3 = mat
    return Vec3(
        r1.x * vec.x + r1.y * vec.y + r1.z * vec.z,
        r2.x * vec.x + r2.y * vec.y + r2.z * vec.z,
        r3.x * vec.x + r3.y * vec.y + r3.z * vec.z,
    )