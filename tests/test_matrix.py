import math

import pytest

from tracekit.matrix import Mat3, Mat4, SingularMatrixError


def flat(m):
    return [x for row in m for x in row]


SAMPLE3 = Mat3(2, 1, 0, 1, 3, 1, 0, 1, 4)
SAMPLE4 = Mat4(4, 1, 0, 2, 1, 5, 1, 0, 0, 1, 6, 1, 2, 0, 1, 7)


def test_default_is_identity():
    assert flat(Mat3()) == [1, 0, 0, 0, 1, 0, 0, 0, 1]
    assert Mat4().trace() == 4.0
    assert Mat3().trace() == 3.0


def test_construct_from_elements_and_copy():
    m = Mat3(range(9))
    assert m[1] == (3.0, 4.0, 5.0)
    assert m[2, 0] == 6.0
    copy = Mat3(m)
    copy[0, 0] = 42
    assert m[0, 0] == 0.0
    assert copy[0, 0] == 42.0


def test_wrong_element_count_raises():
    with pytest.raises(ValueError):
        Mat3(1, 2, 3)
    with pytest.raises(ValueError):
        Mat4(Mat3())


def test_setitem_row_and_index_errors():
    m = Mat4()
    m[2] = (9, 8, 7, 6)
    assert m[2] == (9.0, 8.0, 7.0, 6.0)
    assert m[-1] == (0.0, 0.0, 0.0, 1.0)
    with pytest.raises(IndexError):
        m[4]
    with pytest.raises(ValueError):
        m[0] = (1, 2)


def test_add_sub_neg_roundtrip():
    total = SAMPLE4 + Mat4()
    assert total - Mat4() == SAMPLE4
    assert SAMPLE4 + (-SAMPLE4) == Mat4(0 for _ in range(16))
    assert (SAMPLE3 - SAMPLE3).trace() == 0.0


def test_scalar_multiply_and_divide():
    assert 2 * SAMPLE3 == SAMPLE3 * 2
    assert (SAMPLE3 * 2) / 2 == SAMPLE3
    assert flat(SAMPLE4 * 3) == [3 * x for x in flat(SAMPLE4)]


def test_identity_is_multiplicative_neutral():
    assert SAMPLE4 * Mat4() == SAMPLE4
    assert Mat3() * SAMPLE3 == SAMPLE3


def test_product_transpose_rule():
    other = Mat4(range(16))
    left = (SAMPLE4 * other).transpose()
    right = other.transpose() * SAMPLE4.transpose()
    assert flat(left) == pytest.approx(flat(right))


def test_mixed_matrix_sizes_rejected():
    with pytest.raises(TypeError):
        SAMPLE3 * SAMPLE4
    assert (SAMPLE3 == SAMPLE4) is False


def test_transpose_twice_and_gl_matrix():
    assert SAMPLE4.transpose().transpose() == SAMPLE4
    m = Mat4(range(16))
    assert list(m.gl_matrix()) == flat(m.transpose())
    assert m.gl_matrix()[1] == m[1, 0]


def test_inverse_roundtrip():
    assert flat(SAMPLE4 * SAMPLE4.inverse()) == pytest.approx(flat(Mat4()), abs=1e-9)
    assert flat(SAMPLE3.inverse() * SAMPLE3) == pytest.approx(flat(Mat3()), abs=1e-9)


def test_inverse_needs_pivoting():
    m = Mat3(0, 1, 0, 1, 0, 0, 0, 0, 1)
    assert flat(m.inverse()) == pytest.approx(flat(m), abs=1e-12)


def test_singular_matrix_raises():
    with pytest.raises(SingularMatrixError):
        Mat3(1, 2, 3, 2, 4, 6, 0, 0, 1).inverse()
    with pytest.raises(SingularMatrixError):
        Mat4(0 for _ in range(16)).inverse()


def test_str_format_and_parse_roundtrip():
    assert str(Mat3()) == "1 0 0\n0 1 0\n0 0 1\n"
    assert Mat4.parse(str(SAMPLE4)) == SAMPLE4
    assert Mat3.parse(str(SAMPLE3)) == SAMPLE3


def test_parse_too_short_raises():
    with pytest.raises(ValueError):
        Mat3.parse("1 2 3")
    with pytest.raises(ValueError):
        Mat4.parse("a " * 16)


def test_from_rows_and_upper33():
    m = Mat4.from_rows((1, 2, 3, 4), (5, 6, 7, 8), (9, 10, 11, 12), (13, 14, 15, 16))
    assert m == Mat4(range(1, 17))
    assert m.upper33() == Mat3(1, 2, 3, 5, 6, 7, 9, 10, 11)
    with pytest.raises(ValueError):
        Mat4.from_rows((1, 2), (3, 4), (5, 6), (7, 8))


def test_is_zero():
    assert Mat4(0 for _ in range(16)).is_zero()
    assert not Mat4().is_zero()


def test_translation_moves_points():
    t = Mat4.translation(1, 2, 3)
    assert t.transform_point((0, 0, 0)) == (1.0, 2.0, 3.0)
    assert t * (1, 1, 1) == (2.0, 3.0, 4.0)
    assert flat(t.inverse()) == pytest.approx(flat(Mat4.translation(-1, -2, -3)))


def test_scale_and_vector4():
    s = Mat4.scale(2, 3, 4)
    assert s * (1, 1, 1, 1) == (2.0, 3.0, 4.0, 1.0)
    assert s.trace() == 10.0
    with pytest.raises(ValueError):
        s * (1, 2)


def test_rotation_is_orthonormal():
    r = Mat4.rotation(0.7, 1, 2, 3)
    assert flat(r * r.transpose()) == pytest.approx(flat(Mat4()), abs=1e-9)
    assert flat(r.inverse()) == pytest.approx(flat(Mat4.rotation(-0.7, 1, 2, 3)), abs=1e-9)


def test_rotation_about_z_quarter_turn():
    r = Mat4.rotation(math.pi / 2, 0, 0, 5)
    x, y, z = r.transform_point((1, 0, 0))
    assert (x, y, z) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


def test_rotation_zero_axis_raises():
    with pytest.raises(ValueError):
        Mat4.rotation(1.0, 0, 0, 0)
    assert flat(Mat4.rotation(0.0, 0, 1, 0)) == pytest.approx(flat(Mat4()))


def test_mat3_vector_product():
    assert SAMPLE3 * (1, 0, 0) == tuple(row[0] for row in SAMPLE3)
    assert Mat3() * (4, 5, 6) == (4.0, 5.0, 6.0)


def test_iteration_yields_rows():
    rows = list(Mat4(range(16)))
    assert rows[3] == (12.0, 13.0, 14.0, 15.0)
    assert len(rows) == 4