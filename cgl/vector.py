"""Two, three and four dimensional vectors of floats."""

from __future__ import annotations

import math
import numbers
import operator

from cgl.color import Color

__all__ = ["Vector2D", "Vector3D", "Vector4D", "dot", "cross"]


def _is_scalar(value) -> bool:
    return isinstance(value, numbers.Real)


class _Vector:
    """Component access, comparison and the arithmetic all vectors share."""

    __slots__ = ()
    _FIELDS: tuple = ()

    def __getitem__(self, index):
        index = operator.index(index)
        try:
            name = self._FIELDS[index]
        except IndexError:
            raise IndexError(f"{type(self).__name__} index out of range") from None
        return getattr(self, name)

    def __setitem__(self, index, value):
        index = operator.index(index)
        try:
            name = self._FIELDS[index]
        except IndexError:
            raise IndexError(f"{type(self).__name__} index out of range") from None
        setattr(self, name, float(value))

    def __iter__(self):
        return (getattr(self, name) for name in self._FIELDS)

    def __len__(self):
        return len(self._FIELDS)

    def __eq__(self, other):
        if not isinstance(other, _Vector) or len(other) != len(self):
            return NotImplemented
        return tuple(self) == tuple(other)

    __hash__ = None

    def __repr__(self):
        args = ", ".join(repr(v) for v in self)
        return f"{type(self).__name__}({args})"

    def _like(self, other) -> bool:
        return isinstance(other, _Vector) and len(other) == len(self)

    def _new(self, values):
        return type(self)(*values)

    def _scaled(self, c):
        return self._new(v * c for v in self)

    def _scale_in_place(self, c):
        for name in self._FIELDS:
            setattr(self, name, getattr(self, name) * c)

    def __neg__(self):
        return self._new(-v for v in self)

    def __add__(self, other):
        if not self._like(other):
            return NotImplemented
        return self._new(a + b for a, b in zip(self, other))

    def __sub__(self, other):
        if not self._like(other):
            return NotImplemented
        return self._new(a - b for a, b in zip(self, other))

    def norm2(self) -> float:
        """Squared Euclidean length."""
        return sum(v * v for v in self)

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.norm2())


class Vector2D(_Vector):
    """A 2D vector."""

    __slots__ = ("x", "y")
    _FIELDS = ("x", "y")

    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)

    def __getitem__(self, index):
        return super().__getitem__(index)

    def __setitem__(self, index, value):
        super().__setitem__(index, value)

    def __neg__(self):
        return super().__neg__()

    def __add__(self, other):
        return super().__add__(other)

    def __sub__(self, other):
        return super().__sub__(other)

    def __mul__(self, r):
        if not _is_scalar(r):
            return NotImplemented
        return self._scaled(r)

    def __rmul__(self, r):
        return self.__mul__(r)

    def __truediv__(self, r):
        if not _is_scalar(r):
            return NotImplemented
        return Vector2D(self.x / r, self.y / r)

    def norm(self) -> float:
        """Euclidean length."""
        return super().norm()

    def norm2(self) -> float:
        """Squared Euclidean length."""
        return super().norm2()

    def unit(self) -> "Vector2D":
        """Unit vector parallel to this one."""
        return self / self.norm()


class Vector3D(_Vector):
    """A 3D vector; ``r``, ``g`` and ``b`` alias ``x``, ``y`` and ``z``.

    ``Vector3D(c)`` gives ``(c, c, c)``.
    """

    __slots__ = ("x", "y", "z")
    _FIELDS = ("x", "y", "z")

    def __init__(self, x=0.0, y=None, z=None):
        if y is None and z is None:
            y = z = x
        elif y is None or z is None:
            raise TypeError("Vector3D takes 0, 1 or 3 components")
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @property
    def r(self) -> float:
        return self.x

    @r.setter
    def r(self, value):
        self.x = float(value)

    @property
    def g(self) -> float:
        return self.y

    @g.setter
    def g(self, value):
        self.y = float(value)

    @property
    def b(self) -> float:
        return self.z

    @b.setter
    def b(self, value):
        self.z = float(value)

    def __getitem__(self, index):
        return super().__getitem__(index)

    def __setitem__(self, index, value):
        super().__setitem__(index, value)

    def __neg__(self):
        return super().__neg__()

    def __add__(self, other):
        return super().__add__(other)

    def __sub__(self, other):
        return super().__sub__(other)

    def __mul__(self, other):
        """Element-wise product with a vector, or scaling by a number."""
        if isinstance(other, Vector3D):
            return self._new(a * b for a, b in zip(self, other))
        if _is_scalar(other):
            return self._scaled(other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return self._scaled(other)
        return NotImplemented

    def __truediv__(self, other):
        """Element-wise quotient with a vector, or division by a number."""
        if isinstance(other, Vector3D):
            return self._new(a / b for a, b in zip(self, other))
        if _is_scalar(other):
            return self._scaled(1.0 / other)
        return NotImplemented

    def __rtruediv__(self, other):
        if _is_scalar(other):
            return self._new(other / v for v in self)
        return NotImplemented

    def rcp(self) -> "Vector3D":
        """Per-component reciprocal."""
        return self._new(1.0 / v for v in self)

    def norm(self) -> float:
        """Euclidean length."""
        return super().norm()

    def norm2(self) -> float:
        """Squared Euclidean length."""
        return super().norm2()

    def unit(self) -> "Vector3D":
        """Unit vector parallel to this one."""
        return self * (1.0 / self.norm())

    def normalize(self) -> None:
        """Divide this vector in place by its length."""
        self._scale_in_place(1.0 / self.norm())

    def to_color(self) -> Color:
        return Color(self.x, self.y, self.z)

    def illum(self) -> float:
        """Luminance of the vector read as an RGB colour."""
        return 0.2126 * self.x + 0.7152 * self.y + 0.0722 * self.z

    @classmethod
    def from_color(cls, color: Color) -> "Vector3D":
        return cls(color.r, color.g, color.b)


class Vector4D(_Vector):
    """A 4D vector; ``r``, ``g``, ``b`` and ``a`` alias the components.

    ``Vector4D(c)`` gives ``(c, c, c, c)`` and ``Vector4D(x, y, z)`` sets ``w`` to 0.
    """

    __slots__ = ("x", "y", "z", "w")
    _FIELDS = ("x", "y", "z", "w")

    def __init__(self, x=0.0, y=None, z=None, w=None):
        if y is None and z is None and w is None:
            y = z = w = x
        elif y is None or z is None:
            raise TypeError("Vector4D takes 0, 1, 3 or 4 components")
        elif w is None:
            w = 0.0
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @property
    def r(self) -> float:
        return self.x

    @r.setter
    def r(self, value):
        self.x = float(value)

    @property
    def g(self) -> float:
        return self.y

    @g.setter
    def g(self, value):
        self.y = float(value)

    @property
    def b(self) -> float:
        return self.z

    @b.setter
    def b(self, value):
        self.z = float(value)

    @property
    def a(self) -> float:
        return self.w

    @a.setter
    def a(self, value):
        self.w = float(value)

    @classmethod
    def from_vector3(cls, v: Vector3D, w=0.0) -> "Vector4D":
        return cls(v.x, v.y, v.z, w)

    def __getitem__(self, index):
        return super().__getitem__(index)

    def __setitem__(self, index, value):
        super().__setitem__(index, value)

    def __neg__(self):
        return super().__neg__()

    def __add__(self, other):
        return super().__add__(other)

    def __sub__(self, other):
        return super().__sub__(other)

    def __mul__(self, c):
        if not _is_scalar(c):
            return NotImplemented
        return self._scaled(c)

    def __rmul__(self, c):
        if not _is_scalar(c):
            return NotImplemented
        return self._scaled(c)

    def __truediv__(self, c):
        if not _is_scalar(c):
            return NotImplemented
        return self._scaled(1.0 / c)

    def rcp(self) -> "Vector4D":
        """Per-component reciprocal."""
        return self._new(1.0 / v for v in self)

    def norm(self) -> float:
        """Euclidean length over all four components."""
        return super().norm()

    def norm2(self) -> float:
        """Squared Euclidean length over all four components."""
        return super().norm2()

    def unit(self) -> "Vector4D":
        """The x, y and z components divided by the full 4D length, with w set to 0."""
        r_norm = 1.0 / math.sqrt(self.norm2())
        return Vector4D(r_norm * self.x, r_norm * self.y, r_norm * self.z)

    def normalize(self) -> None:
        """Divide all four components in place by the length."""
        self._scale_in_place(1.0 / self.norm())

    def to_3d(self) -> Vector3D:
        """The x, y and z components, dropping w."""
        return Vector3D(self.x, self.y, self.z)

    def project_to_3d(self) -> Vector3D:
        """The x, y and z components divided by w."""
        return Vector3D(self.x / self.w, self.y / self.w, self.z / self.w)


def dot(u, v) -> float:
    """Inner product of two vectors of the same dimension."""
    if not isinstance(u, _Vector) or not isinstance(v, _Vector) or len(u) != len(v):
        raise TypeError("dot needs two vectors of the same dimension")
    return sum(a * b for a, b in zip(u, v))


def cross(u, v):
    """Cross product: a number for 2D vectors, a Vector3D for 3D vectors."""
    if isinstance(u, Vector2D) and isinstance(v, Vector2D):
        return u.x * v.y - u.y * v.x
    if isinstance(u, Vector3D) and isinstance(v, Vector3D):
        return Vector3D(
            u.y * v.z - u.z * v.y,
            u.z * v.x - u.x * v.z,
            u.x * v.y - u.y * v.x,
        )
    raise TypeError("cross needs two 2D or two 3D vectors")