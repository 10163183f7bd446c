"""3x3 and 4x4 matrices of floats stored as column vectors."""

from __future__ import annotations

import math
import numbers
import operator

from cgl.vector import Vector3D, Vector4D

__all__ = ["Matrix3x3", "Matrix4x4", "outer"]


def _det(rows) -> float:
    """Determinant of a square matrix given as a list of rows."""
    size = len(rows)
    if size == 1:
        return rows[0][0]
    if size == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    total = 0.0
    for j, value in enumerate(rows[0]):
        if value == 0.0:
            continue
        sign = -1.0 if j % 2 else 1.0
        total += sign * value * _det(_minor(rows, 0, j))
    return total


def _minor(rows, i, j):
    """The rows with row ``i`` and column ``j`` removed."""
    return [
        [value for c, value in enumerate(row) if c != j]
        for r, row in enumerate(rows)
        if r != i
    ]


class _Matrix:
    """Shared storage and arithmetic for square matrices.

    Element ``(i, j)`` is row ``i``, column ``j``; indexing with a single
    integer gives the column vector itself, which can be changed in place.
    """

    __slots__ = ("_cols",)
    _N = 0
    _VEC: type = Vector3D

    def __init__(self, values=None):
        n = self._N
        self._cols = [self._VEC(0.0) for _ in range(n)]
        if values is None:
            self._set_default()
            return
        flat = self._flatten(values)
        for i in range(n):
            for j in range(n):
                self._cols[j][i] = flat[i * n + j]

    def _set_default(self) -> None:
        """Fill a freshly built matrix when no values are given."""

    @classmethod
    def _flatten(cls, values):
        n = cls._N
        items = list(values)
        if len(items) == n and all(not isinstance(v, numbers.Real) for v in items):
            rows = [list(row) for row in items]
            if any(len(row) != n for row in rows):
                raise ValueError(f"each row must hold {n} values")
            items = [v for row in rows for v in row]
        if len(items) != n * n:
            raise ValueError(f"a {n}x{n} matrix needs {n * n} values")
        return [float(v) for v in items]

    def _rows(self):
        n = self._N
        return [[self._cols[j][i] for j in range(n)] for i in range(n)]

    def _key(self, key):
        i, j = key
        n = self._N
        i = operator.index(i)
        j = operator.index(j)
        if not (-n <= i < n and -n <= j < n):
            raise IndexError(f"{type(self).__name__} index out of range")
        return i, j

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = self._key(key)
            return self._cols[j][i]
        return self._cols[operator.index(key)]

    def __setitem__(self, key, value):
        if isinstance(key, tuple):
            i, j = self._key(key)
            self._cols[j][i] = value
            return
        column = self._cols[operator.index(key)]
        if not isinstance(value, self._VEC):
            raise TypeError(f"a column must be a {self._VEC.__name__}")
        for k, component in enumerate(value):
            column[k] = component

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._rows() == other._rows()

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self._rows()!r})"

    def zero(self, val=0.0) -> None:
        """Set every element to ``val``."""
        for column in self._cols:
            for k in range(self._N):
                column[k] = val

    def det(self) -> float:
        """Determinant."""
        return _det(self._rows())

    def norm(self) -> float:
        """Frobenius norm."""
        return math.sqrt(sum(column.norm2() for column in self._cols))

    def column(self, i):
        """The ``i``-th column vector, shared with the matrix."""
        return self._cols[i]

    def T(self):
        """Transpose."""
        rows = self._rows()
        return type(self)([list(col) for col in zip(*rows)])

    def inv(self):
        """Inverse; raises ZeroDivisionError for a singular matrix."""
        rows = self._rows()
        d = _det(rows)
        if d == 0.0:
            raise ZeroDivisionError("matrix is singular")
        n = self._N
        adjugate = [
            [
                (-1.0 if (i + j) % 2 else 1.0) * _det(_minor(rows, j, i))
                for j in range(n)
            ]
            for i in range(n)
        ]
        result = type(self)(adjugate)
        result /= d
        return result

    def __iadd__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        for mine, theirs in zip(self._cols, other._cols):
            for k in range(self._N):
                mine[k] = mine[k] + theirs[k]
        return self

    def __neg__(self):
        return self._scaled(-1.0)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        rows = [
            [a - b for a, b in zip(row_a, row_b)]
            for row_a, row_b in zip(self._rows(), other._rows())
        ]
        return type(self)(rows)

    def _scaled(self, c):
        return type(self)([[c * v for v in row] for row in self._rows()])

    def __mul__(self, other):
        """Scale by a number, multiply by a matrix or apply to a vector."""
        if isinstance(other, numbers.Real):
            return self._scaled(other)
        if type(other) is type(self):
            a = self._rows()
            b = other._rows()
            n = self._N
            rows = [
                [sum(a[i][k] * b[k][j] for k in range(n)) for j in range(n)]
                for i in range(n)
            ]
            return type(self)(rows)
        if isinstance(other, self._VEC):
            result = self._VEC(0.0)
            for component, column in zip(other, self._cols):
                result = result + component * column
            return self._VEC(*result)
        return NotImplemented

    def __rmul__(self, c):
        if isinstance(c, numbers.Real):
            return self._scaled(c)
        return NotImplemented

    def __itruediv__(self, x):
        if not isinstance(x, numbers.Real):
            return NotImplemented
        rx = 1.0 / x
        for column in self._cols:
            for k in range(self._N):
                column[k] = column[k] * rx
        return self

    def __str__(self):
        return "".join(
            "[ " + "".join(f"{v:g} " for v in row) + "]\n" for row in self._rows()
        )


class Matrix3x3(_Matrix):
    """A 3x3 matrix; built from nine row-major values or three rows.

    With no values it is the identity.
    """

    __slots__ = ()
    _N = 3
    _VEC = Vector3D

    def __init__(self, values=None):
        super().__init__(values)

    def _set_default(self) -> None:
        for k in range(3):
            self._cols[k][k] = 1.0

    def __getitem__(self, key):
        return super().__getitem__(key)

    def __setitem__(self, key, value):
        super().__setitem__(key, value)

    def zero(self, val=0.0) -> None:
        """Set every element to ``val``."""
        super().zero(val)

    def det(self) -> float:
        """Determinant."""
        return super().det()

    def norm(self) -> float:
        """Frobenius norm."""
        return super().norm()

    @staticmethod
    def identity() -> "Matrix3x3":
        """The 3x3 identity matrix."""
        return Matrix3x3([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])

    @staticmethod
    def cross_product(u: Vector3D) -> "Matrix3x3":
        """The matrix that takes ``v`` to ``cross(u, v)``."""
        return Matrix3x3(
            [
                [0.0, -u.z, u.y],
                [u.z, 0.0, -u.x],
                [-u.y, u.x, 0.0],
            ]
        )

    def column(self, i) -> Vector3D:
        """The ``i``-th column vector, shared with the matrix."""
        return super().column(i)

    def T(self) -> "Matrix3x3":
        """Transpose."""
        return super().T()

    def inv(self) -> "Matrix3x3":
        """Inverse; raises ZeroDivisionError for a singular matrix."""
        return super().inv()

    def __iadd__(self, other):
        return super().__iadd__(other)

    def __neg__(self):
        return super().__neg__()

    def __sub__(self, other):
        return super().__sub__(other)

    def __mul__(self, other):
        return super().__mul__(other)

    def __rmul__(self, c):
        return super().__rmul__(c)

    def __itruediv__(self, x):
        return super().__itruediv__(x)

    def __str__(self):
        return super().__str__()


class Matrix4x4(_Matrix):
    """A 4x4 matrix; built from sixteen row-major values or four rows.

    With no values every element is zero.
    """

    __slots__ = ()
    _N = 4
    _VEC = Vector4D

    def __init__(self, values=None):
        super().__init__(values)

    def __getitem__(self, key):
        return super().__getitem__(key)

    def __setitem__(self, key, value):
        super().__setitem__(key, value)

    def zero(self, val=0.0) -> None:
        """Set every element to ``val``."""
        super().zero(val)

    def det(self) -> float:
        """Determinant."""
        return super().det()

    def norm(self) -> float:
        """Frobenius norm."""
        return super().norm()

    @staticmethod
    def identity() -> "Matrix4x4":
        """A fresh 4x4 identity matrix."""
        return Matrix4x4(
            [[1.0 if i == j else 0.0 for j in range(4)] for i in range(4)]
        )

    def column(self, i) -> Vector4D:
        """The ``i``-th column vector, shared with the matrix."""
        return super().column(i)

    def T(self) -> "Matrix4x4":
        """Transpose."""
        return super().T()

    def inv(self) -> "Matrix4x4":
        """Inverse; raises ZeroDivisionError for a singular matrix."""
        return super().inv()

    def __iadd__(self, other):
        return super().__iadd__(other)

    def __neg__(self):
        return super().__neg__()

    def __sub__(self, other):
        return super().__sub__(other)

    def __mul__(self, other):
        return super().__mul__(other)

    def __rmul__(self, c):
        return super().__rmul__(c)

    def __itruediv__(self, x):
        return super().__itruediv__(x)

    def __str__(self):
        return super().__str__()


def outer(u, v):
    """Outer product: element ``(i, j)`` is ``u[i] * v[j]``."""
    if isinstance(u, Vector4D) and isinstance(v, Vector4D):
        return Matrix4x4([[a * b for b in v] for a in u])
    if isinstance(u, Vector3D) and isinstance(v, Vector3D):
        return Matrix3x3([[a * b for b in v] for a in u])
    raise TypeError("outer needs two 3D or two 4D vectors")