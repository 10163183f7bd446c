"""Quaternions for representing and combining 3D rotations."""

from __future__ import annotations

import math
import numbers

from cgl.matrix import Matrix3x3, Matrix4x4
from cgl.misc import EPS_D, PI, clamp
from cgl.vector import Vector3D, Vector4D, cross

__all__ = ["Quaternion", "slerp"]


def _fmt(value: float) -> str:
    return f"{value:g}"


class Quaternion(Vector4D):
    """A quaternion ``x i + y j + z k + w``; the default is the identity (0, 0, 0, 1)."""

    __slots__ = ()

    def __init__(self, x=0.0, y=0.0, z=0.0, w=1.0):
        super().__init__(x, y, z, w)

    @classmethod
    def from_vector3(cls, v: Vector3D, w=0.0) -> "Quaternion":
        """Build from a 3D vector part and a real part."""
        return cls(v.x, v.y, v.z, w)

    @classmethod
    def from_vector4(cls, v: Vector4D) -> "Quaternion":
        """Build from the four components of a 4D vector."""
        return cls(v.x, v.y, v.z, v.w)

    def from_axis_angle(self, axis: Vector3D, radians) -> None:
        """Set this quaternion to the rotation by ``radians`` about ``axis``."""
        half = radians / 2
        n_axis = axis.unit()
        sin_theta = math.sin(half)
        self.x = sin_theta * n_axis.x
        self.y = sin_theta * n_axis.y
        self.z = sin_theta * n_axis.z
        self.w = math.cos(half)
        self.normalize()

    def complex(self) -> Vector3D:
        """The vector part ``(x, y, z)``."""
        return Vector3D(self.x, self.y, self.z)

    def real(self) -> float:
        """The real part ``w``."""
        return self.w

    def conjugate(self) -> "Quaternion":
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> "Quaternion":
        """The conjugate divided by the norm."""
        return self.conjugate() / self.norm()

    def product(self, rhs: "Quaternion") -> "Quaternion":
        """The quaternion product ``self * rhs``."""
        x, y, z, w = self.x, self.y, self.z, self.w
        return Quaternion(
            y * rhs.z - z * rhs.y + x * rhs.w + w * rhs.x,
            z * rhs.x - x * rhs.z + y * rhs.w + w * rhs.y,
            x * rhs.y - y * rhs.x + z * rhs.w + w * rhs.z,
            w * rhs.w - x * rhs.x - y * rhs.y - z * rhs.z,
        )

    def __mul__(self, rhs):
        if isinstance(rhs, Quaternion):
            return self.product(rhs)
        if isinstance(rhs, numbers.Real):
            return self._scaled(rhs)
        return NotImplemented

    def __rmul__(self, s):
        if isinstance(s, numbers.Real):
            return self._scaled(s)
        return NotImplemented

    def matrix(self) -> Matrix4x4:
        """Matrix ``M`` with ``M * q.vector() == (self * q).vector()``."""
        x, y, z, w = self.x, self.y, self.z, self.w
        return Matrix4x4(
            [
                [w, -z, y, x],
                [z, w, -x, y],
                [-y, x, w, z],
                [-x, -y, -z, w],
            ]
        )

    def right_matrix(self) -> Matrix4x4:
        """Matrix ``M`` with ``q.vector()^T * M == (q * self).vector()^T``."""
        x, y, z, w = self.x, self.y, self.z, self.w
        return Matrix4x4(
            [
                [w, -z, y, -x],
                [z, w, -x, -y],
                [-y, x, w, -z],
                [x, y, z, w],
            ]
        )

    def vector(self) -> Vector4D:
        """The components as a plain 4D vector."""
        return Vector4D(self.x, self.y, self.z, self.w)

    def rotation_matrix(self) -> Matrix3x3:
        """The rotation matrix of this quaternion, assumed to be of unit length."""
        x, y, z, w = self.x, self.y, self.z, self.w
        return Matrix3x3(
            [
                [1 - 2 * y * y - 2 * z * z, 2 * x * y - 2 * z * w, 2 * x * z + 2 * y * w],
                [2 * x * y + 2 * z * w, 1 - 2 * x * x - 2 * z * z, 2 * y * z - 2 * x * w],
                [2 * x * z - 2 * y * w, 2 * y * z + 2 * x * w, 1 - 2 * x * x - 2 * y * y],
            ]
        )

    def scaled_axis(self) -> Vector3D:
        """The rotation axis taken from the normalised quaternion."""
        q1 = Quaternion.from_vector4(self.unit())
        s = math.sqrt(1 - q1.w * q1.w)
        if s < 0.001:
            return Vector3D(q1.x, q1.y, q1.z)
        return Vector3D(q1.x / s, q1.y / s, q1.z / s)

    def set_scaled_axis(self, vec: Vector3D) -> None:
        """Set this quaternion to the rotation given by a scaled axis."""
        theta = vec.norm()
        if theta > 0.0001:
            s = math.sin(theta / 2.0)
            axis = vec / theta * s
            self.x, self.y, self.z = axis.x, axis.y, axis.z
            self.w = math.cos(theta / 2.0)
        else:
            self.x = self.y = self.z = 0.0
            self.w = 1.0

    def rotated_vector(self, v: Vector3D) -> Vector3D:
        """``v`` rotated by this quaternion, assumed to be of unit length."""
        return ((self * Quaternion.from_vector3(v, 0.0)) * self.conjugate()).complex()

    def set_euler(self, euler: Vector3D) -> None:
        """Set this quaternion from Euler angles in roll-pitch-yaw order."""
        c1 = math.cos(euler[2] * 0.5)
        c2 = math.cos(euler[1] * 0.5)
        c3 = math.cos(euler[0] * 0.5)
        s1 = math.sin(euler[2] * 0.5)
        s2 = math.sin(euler[1] * 0.5)
        s3 = math.sin(euler[0] * 0.5)
        self.x = c1 * c2 * s3 - s1 * s2 * c3
        self.y = c1 * s2 * c3 + s1 * c2 * s3
        self.z = s1 * c2 * c3 - c1 * s2 * s3
        self.w = c1 * c2 * c3 + s1 * s2 * s3

    def euler(self) -> Vector3D:
        """Euler angles in roll-pitch-yaw order."""
        x, y, z, w = self.x, self.y, self.z, self.w
        sqw, sqx, sqy, sqz = w * w, x * x, y * y, z * z
        pitch = math.asin(clamp(2.0 * (w * y - x * z), -1.0, 1.0))
        if PI * 0.5 - abs(pitch) > EPS_D:
            yaw = math.atan2(2.0 * (x * y + w * z), sqx - sqy - sqz + sqw)
            roll = math.atan2(2.0 * (w * x + y * z), sqw - sqx - sqy + sqz)
        else:
            yaw = math.atan2(2 * y * z - 2 * x * w, 2 * x * z + 2 * y * w)
            roll = 0.0
            if pitch < 0:
                yaw = PI - yaw
        return Vector3D(roll, pitch, yaw)

    def decouple_z(self) -> tuple["Quaternion", "Quaternion"]:
        """Split into ``(qxy, qz)`` with ``self == qxy * qz``, ``qz`` about the z axis."""
        ztt = Vector3D(0.0, 0.0, 1.0)
        zbt = self.rotated_vector(ztt)
        axis_xy = cross(ztt, zbt)
        axis_norm = axis_xy.norm()
        axis_theta = math.acos(clamp(zbt.z, -1.0, 1.0))
        if axis_norm > 0.00001:
            axis_xy = axis_xy * (axis_theta / axis_norm)
        qxy = Quaternion()
        qxy.set_scaled_axis(axis_xy)
        qz = qxy.conjugate() * self
        return qxy, qz

    def slerp_to(self, q1: "Quaternion", t) -> "Quaternion":
        """Spherical interpolation from this quaternion towards ``q1``."""
        return slerp(self, q1, t)

    def __str__(self) -> str:
        return (
            f"{{ {_fmt(self.x)}i, {_fmt(self.y)}j, "
            f"{_fmt(self.z)}k, {_fmt(self.w)} }}"
        )


def slerp(q0: Quaternion, q1: Quaternion, t) -> Quaternion:
    """Spherical linear interpolation between ``q0`` and ``q1`` by fraction ``t``."""
    omega = math.acos(
        clamp(q0.x * q1.x + q0.y * q1.y + q0.z * q1.z + q0.w * q1.w, -1.0, 1.0)
    )
    if abs(omega) < 1e-10:
        omega = 1e-10
    som = math.sin(omega)
    st0 = math.sin((1 - t) * omega) / som
    st1 = math.sin(t * omega) / som
    return Quaternion(
        q0.x * st0 + q1.x * st1,
        q0.y * st0 + q1.y * st1,
        q0.z * st0 + q1.z * st1,
        q0.w * st0 + q1.w * st1,
    )