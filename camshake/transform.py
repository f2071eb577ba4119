"""Small vector, quaternion and transform types used by the shake logic.

Conventions: right-handed, Y up, a camera looks down -Z.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Union

_Number = Union[int, float]


@dataclass(frozen=True)
class Vec2:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar["Vec2"]

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, other: Vec2 | _Number) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: _Number) -> Vec2:
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __abs__(self) -> float:
        return math.hypot(self.x, self.y)


Vec2.ZERO = Vec2(0.0, 0.0)


@dataclass(frozen=True)
class Vec3:
    """A 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar["Vec3"]
    X: ClassVar["Vec3"]
    Y: ClassVar["Vec3"]
    Z: ClassVar["Vec3"]
    NEG_Z: ClassVar["Vec3"]

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other: Vec3 | _Number) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: _Number) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: _Number) -> Vec3:
        if isinstance(other, (int, float)):
            return Vec3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __abs__(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize_or_zero(self) -> Vec3:
        """Return the unit vector in this direction, or zero if that is not finite."""
        length = abs(self)
        if length == 0.0 or not math.isfinite(length):
            return Vec3.ZERO
        result = self / length
        if not all(math.isfinite(c) for c in (result.x, result.y, result.z)):
            return Vec3.ZERO
        return result


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.X = Vec3(1.0, 0.0, 0.0)
Vec3.Y = Vec3(0.0, 1.0, 0.0)
Vec3.Z = Vec3(0.0, 0.0, 1.0)
Vec3.NEG_Z = Vec3(0.0, 0.0, -1.0)


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return Vec3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


@dataclass(frozen=True)
class Quat:
    """A rotation quaternion; the default is the identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    IDENTITY: ClassVar["Quat"]

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> Quat:
        """Rotation of ``angle`` radians about the unit vector ``axis``."""
        half = angle * 0.5
        s = math.sin(half)
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    @classmethod
    def from_euler_yxz(cls, yaw: float, pitch: float, roll: float) -> Quat:
        """Rotation about Y by yaw, then X by pitch, then Z by roll (intrinsic)."""
        return (
            cls.from_axis_angle(Vec3.Y, yaw)
            * cls.from_axis_angle(Vec3.X, pitch)
            * cls.from_axis_angle(Vec3.Z, roll)
        )

    def mul_vec3(self, v: Vec3) -> Vec3:
        """Rotate ``v`` by this quaternion."""
        u = Vec3(self.x, self.y, self.z)
        t = _cross(u, v) * 2.0
        return v + t * self.w + _cross(u, t)

    def __mul__(self, other: Quat | Vec3) -> Quat | Vec3:
        if isinstance(other, Quat):
            x1, y1, z1, w1 = self.x, self.y, self.z, self.w
            x2, y2, z2, w2 = other.x, other.y, other.z, other.w
            return Quat(
                w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
                w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
                w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
                w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            )
        if isinstance(other, Vec3):
            return self.mul_vec3(other)
        return NotImplemented


Quat.IDENTITY = Quat()


@dataclass
class Transform:
    """Position, orientation and scale of an entity."""

    translation: Vec3 = field(default_factory=Vec3)
    rotation: Quat = field(default_factory=Quat)
    scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))

    def forward(self) -> Vec3:
        """The direction this transform looks towards (local -Z)."""
        return self.rotation.mul_vec3(Vec3.NEG_Z)

    def right(self) -> Vec3:
        """The local +X direction."""
        return self.rotation.mul_vec3(Vec3.X)

    def reset(self) -> None:
        """Clear translation and rotation back to their defaults."""
        self.translation = Vec3()
        self.rotation = Quat()