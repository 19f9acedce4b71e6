"""Three-dimensional vectors and the rotations used to aim the sky view."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

_ZERO_LENGTH = 1e-9


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable vector in three-dimensional space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vec3:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(dot(self, self))


def dot(a: Vec3, b: Vec3) -> float:
    """Scalar product of two vectors."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Vector product of two vectors."""
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def normalize(v: Vec3) -> Vec3:
    """Unit vector in the direction of ``v``; the zero vector stays zero."""
    length = v.length()
    if length < _ZERO_LENGTH:
        return Vec3()
    return Vec3(v.x / length, v.y / length, v.z / length)


def rotate_rodrigues(v: Vec3, k: Vec3, theta: float) -> Vec3:
    """Rotate ``v`` by ``theta`` radians about the unit axis ``k``."""
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return v * cos_t + cross(k, v) * sin_t + k * (dot(k, v) * (1.0 - cos_t))


def from_ra_dec(ra: float, dec: float) -> Vec3:
    """Unit vector for a right ascension and declination given in degrees."""
    ra_rad = math.radians(ra)
    dec_rad = math.radians(dec)
    return Vec3(
        math.cos(dec_rad) * math.cos(ra_rad),
        math.cos(dec_rad) * math.sin(ra_rad),
        math.sin(dec_rad),
    )