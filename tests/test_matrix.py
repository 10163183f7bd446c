import math

import pytest

from cgl.matrix import Matrix3x3, Matrix4x4, outer
from cgl.vector import Vector3D, Vector4D, cross, dot

A3 = [[2.0, 1.0, 0.5], [0.0, 3.0, -1.0], [4.0, 0.25, 1.0]]
B3 = [[1.0, -2.0, 0.0], [0.5, 1.0, 2.0], [3.0, 0.0, -1.0]]
A4 = [
    [2.0, 0.0, 1.0, 3.0],
    [1.0, 4.0, 0.0, -1.0],
    [0.0, 2.0, 5.0, 1.0],
    [1.0, 1.0, 0.0, 2.0],
]
B4 = [
    [1.0, 2.0, 0.0, 0.0],
    [0.0, 1.0, 3.0, 0.0],
    [2.0, 0.0, 1.0, 1.0],
    [0.0, 1.0, 0.0, 1.0],
]


def _entries(m, n):
    return [m[i, j] for i in range(n) for j in range(n)]


def test_default_3x3_is_identity():
    assert Matrix3x3() == Matrix3x3.identity()


def test_default_4x4_is_zero():
    m = Matrix4x4()
    assert all(m[i, j] == 0.0 for i in range(4) for j in range(4))


def test_row_major_construction_and_columns():
    m = Matrix3x3([1, 2, 3, 4, 5, 6, 7, 8, 9])
    assert m[0, 1] == 2.0
    assert m[2, 0] == 7.0
    assert m.column(0) == Vector3D(1, 4, 7)
    assert m[1] == Vector3D(2, 5, 8)


def test_nested_rows_equal_flat():
    flat = [v for row in A3 for v in row]
    assert Matrix3x3(A3) == Matrix3x3(flat)


def test_wrong_value_count_raises():
    with pytest.raises(ValueError):
        Matrix3x3([1, 2, 3])
    with pytest.raises(ValueError):
        Matrix4x4([1.0] * 9)


def test_index_out_of_range():
    with pytest.raises(IndexError):
        Matrix3x3()[3, 0]


def test_column_is_shared():
    m = Matrix3x3()
    m.column(1)[2] = 7.0
    assert m[2, 1] == 7.0


def test_set_element_and_column():
    m = Matrix4x4()
    m[1, 2] = 5.0
    m[0] = Vector4D(1, 2, 3, 4)
    assert m[1, 2] == 5.0
    assert m[3, 0] == 4.0


def test_zero_sets_all():
    m = Matrix3x3(A3)
    m.zero(2.5)
    assert all(m[i, j] == 2.5 for i in range(3) for j in range(3))
    m.zero()
    assert m.norm() == 0.0


def test_identity_det_and_norm():
    assert Matrix3x3.identity().det() == 1.0
    assert Matrix4x4.identity().det() == 1.0
    assert math.isclose(Matrix3x3.identity().norm(), math.sqrt(3))
    assert math.isclose(Matrix4x4.identity().norm(), 2.0)


def test_det_of_product():
    a, b = Matrix3x3(A3), Matrix3x3(B3)
    assert math.isclose((a * b).det(), a.det() * b.det())
    a4, b4 = Matrix4x4(A4), Matrix4x4(B4)
    assert math.isclose((a4 * b4).det(), a4.det() * b4.det())


def test_det_of_transpose():
    a4 = Matrix4x4(A4)
    assert math.isclose(a4.T().det(), a4.det())


def test_transpose_swaps():
    m = Matrix4x4(A4)
    t = m.T()
    assert all(t[i, j] == m[j, i] for i in range(4) for j in range(4))
    assert t.T() == m


@pytest.mark.parametrize("cls,rows,n", [(Matrix3x3, A3, 3), (Matrix4x4, A4, 4)])
def test_inverse_round_trip(cls, rows, n):
    m = cls(rows)
    identity = _entries(cls.identity(), n)
    assert _entries(m * m.inv(), n) == pytest.approx(identity, abs=1e-9)
    assert _entries(m.inv() * m, n) == pytest.approx(identity, abs=1e-9)


def test_singular_inverse_raises():
    with pytest.raises(ZeroDivisionError):
        Matrix3x3([1, 2, 3, 2, 4, 6, 0, 1, 1]).inv()
    with pytest.raises(ZeroDivisionError):
        Matrix4x4().inv()


def test_cross_product_matrix():
    u = Vector3D(1.0, -2.0, 3.0)
    v = Vector3D(0.5, 4.0, -1.0)
    assert tuple(Matrix3x3.cross_product(u) * v) == pytest.approx(
        tuple(cross(u, v)), abs=1e-9
    )
    assert math.isclose(Matrix3x3.cross_product(u).det(), 0.0, abs_tol=1e-12)


def test_matrix_vector_identity():
    v = Vector4D(1, 2, 3, 4)
    assert Matrix4x4.identity() * v == v
    w = Vector3D(1, 2, 3)
    assert Matrix3x3.identity() * w == w


def test_matrix_vector_is_column_combination():
    m = Matrix3x3(A3)
    v = Vector3D(1.0, 0.0, 0.0)
    assert m * v == m.column(0)


def test_outer_product():
    u = Vector3D(1, 2, 3)
    v = Vector3D(-1, 0.5, 2)
    w = Vector3D(3, 1, -2)
    assert tuple(outer(u, v) * w) == pytest.approx(tuple(u * dot(v, w)), abs=1e-9)
    m4 = outer(Vector4D(1, 2, 3, 4), Vector4D(1, 0, 0, 0))
    assert m4.column(0) == Vector4D(1, 2, 3, 4)


def test_outer_rejects_mixed():
    with pytest.raises(TypeError):
        outer(Vector3D(1, 2, 3), Vector4D(1, 2, 3, 4))


def test_scalar_multiplication_both_sides():
    m = Matrix4x4(A4)
    assert 2 * m == m * 2
    assert (m * 2)[1, 1] == 2 * m[1, 1]


def test_negation_and_subtraction():
    m = Matrix3x3(A3)
    n = Matrix3x3(B3)
    assert -(-m) == m
    d = m - n
    d += n
    assert _entries(d, 3) == pytest.approx(_entries(m, 3), abs=1e-9)


def test_iadd_keeps_columns():
    m = Matrix4x4(A4)
    col = m.column(2)
    m += Matrix4x4.identity()
    assert col is m.column(2)
    assert m[2, 2] == A4[2][2] + 1.0


def test_in_place_division():
    m = Matrix3x3(A3)
    m /= 2.0
    assert m[0, 0] == pytest.approx(1.0)
    assert m[1, 2] == pytest.approx(-0.5)
    expected = [v for row in A3 for v in row]
    assert _entries(m * 2, 3) == pytest.approx(expected, abs=1e-9)


def test_str_format():
    assert str(Matrix3x3()) == "[ 1 0 0 ]\n[ 0 1 0 ]\n[ 0 0 1 ]\n"


def test_str_rows_of_4x4():
    text = str(Matrix4x4.identity())
    assert text.splitlines()[3] == "[ 0 0 0 1 ]"