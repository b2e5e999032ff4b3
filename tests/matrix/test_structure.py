"""
Tests for structural operations.

Validates:
    - apply: elementwise transform into a fresh matrix
    - transpose / T
    - slice: half-open ranges, None and -1 defaults, bound validation
    - horizontal / vertical concatenation
    - Results never alias their source
"""

import pytest

from densematrix import (
    Matrix,
    OutOfBoundsError,
    ShapeMismatchError,
    from_rows,
    horizontal,
    vertical,
)


# ═══════════════════════════════════════════════════════════════════════
# apply / transpose
# ═══════════════════════════════════════════════════════════════════════


class TestApply:

    def test_apply(self):
        a = from_rows([[2, 0], [0, 3]])
        assert a.apply(lambda x: x + 1) == from_rows([[3, 1], [1, 4]])

    def test_apply_preserves_shape(self, a23):
        assert a23.apply(str).shape == (2, 3)

    def test_apply_does_not_mutate_source(self, a22):
        a22.apply(lambda x: x * 10)
        assert a22 == from_rows([[1, 2], [3, 4]])

    def test_apply_empty(self):
        assert Matrix(0, 2).apply(lambda x: 1 / 0) == Matrix(0, 2)


class TestTranspose:

    def test_square(self, a22):
        assert a22.transpose() == from_rows([[1, 3], [2, 4]])

    def test_rectangular(self, a23):
        t = a23.transpose()
        assert t.shape == (3, 2)
        assert t == from_rows([[1, 4], [2, 5], [3, 6]])

    def test_symmetric_is_fixed_point(self):
        a = from_rows([[2, 0], [0, 3]])
        assert a.transpose() == a

    def test_T_property(self, a23):
        assert a23.T == a23.transpose()

    def test_empty_extents(self):
        assert Matrix(0, 3).transpose().shape == (3, 0)

    def test_independent(self, a22):
        t = a22.transpose()
        t[0, 1] = 100
        assert a22[1, 0] == 3


# ═══════════════════════════════════════════════════════════════════════
# slice
# ═══════════════════════════════════════════════════════════════════════


class TestSlice:

    def test_submatrix(self, a23):
        assert a23.slice(0, 2, 1, 3) == from_rows([[2, 3], [5, 6]])

    def test_sentinel_defaults(self, a23):
        assert a23.slice(-1, -1, -1, -1) == a23

    def test_none_defaults(self, a23):
        assert a23.slice() == a23
        assert a23.slice(l=2) == from_rows([[3], [6]])
        assert a23.slice(d=1) == from_rows([[1, 2, 3]])

    def test_mixed_sentinels(self, a23):
        assert a23.slice(1, -1, -1, 2) == from_rows([[4, 5]])

    def test_empty_ranges(self, a23):
        assert a23.slice(1, 1, 0, 3).shape == (0, 3)
        assert a23.slice(0, 2, 3, 3).shape == (2, 0)

    def test_result_shape(self, a23):
        assert a23.slice(0, 1, 0, 2).shape == (1, 2)

    def test_deep_copy(self, a23):
        s = a23.slice(0, 1, 0, 1)
        s[0, 0] = 42
        assert a23[0, 0] == 1

    @pytest.mark.parametrize("bounds", [
        (0, 3, -1, -1),   # d > rows
        (-1, -1, 0, 4),   # r > cols
        (2, 1, -1, -1),   # u > d
        (-1, -1, 2, 1),   # l > r
        (-2, -1, -1, -1),  # -1 is the only accepted negative
    ])
    def test_invalid_bounds(self, a23, bounds):
        with pytest.raises(OutOfBoundsError):
            a23.slice(*bounds)

    def test_invalid_bounds_report_axis(self, a23):
        with pytest.raises(OutOfBoundsError) as exc_info:
            a23.slice(-1, -1, 0, 5)
        assert exc_info.value.axis == "col"
        assert exc_info.value.extent == 3

    def test_non_integer_bound(self, a23):
        with pytest.raises(TypeError):
            a23.slice(0.5, 1, 0, 1)


# ═══════════════════════════════════════════════════════════════════════
# Concatenation
# ═══════════════════════════════════════════════════════════════════════


class TestConcatenation:

    def test_horizontal(self):
        a = from_rows([[1], [2]])
        b = from_rows([[3, 4], [5, 6]])
        assert horizontal(a, b) == from_rows([[1, 3, 4], [2, 5, 6]])

    def test_vertical(self):
        a = from_rows([[1, 2]])
        b = from_rows([[3, 4], [5, 6]])
        assert vertical(a, b) == from_rows([[1, 2], [3, 4], [5, 6]])

    def test_horizontal_mismatch(self, a22):
        with pytest.raises(ShapeMismatchError, match="horizontal"):
            horizontal(a22, from_rows([[1, 2, 3]]))

    def test_vertical_mismatch(self, a22, a23):
        with pytest.raises(ShapeMismatchError, match="vertical"):
            vertical(a22, a23)

    def test_with_empty(self, a22):
        assert horizontal(a22, Matrix(2, 0)) == a22
        assert vertical(Matrix(0, 2), a22) == a22

    def test_result_is_independent(self, a22, b22):
        joined = vertical(a22, b22)
        joined[0, 0] = -1
        assert a22[0, 0] == 1

    def test_requires_matrices(self, a22):
        with pytest.raises(TypeError):
            horizontal(a22, [[1], [2]])

    def test_inverse_of_slice(self, a23):
        for k in range(a23.cols + 1):
            assert horizontal(a23.slice(-1, -1, 0, k), a23.slice(-1, -1, k, -1)) == a23
        for k in range(a23.rows + 1):
            assert vertical(a23.slice(0, k, -1, -1), a23.slice(k, -1, -1, -1)) == a23
