"""
Tests for row and element access.

Validates:
    - A[i] returns a live row view whose writes update the matrix
    - A[i, j] reads and writes single cells
    - row(i) is a read-only copy
    - Negative and out-of-range indices raise OutOfBoundsError
"""

import pytest

from densematrix import Matrix, OutOfBoundsError, ShapeMismatchError, from_rows


class TestRowView:

    def test_read(self, a23):
        row = a23[1]
        assert len(row) == 3
        assert list(row) == [4, 5, 6]
        assert row[2] == 6

    def test_chained_write_updates_matrix(self, a22):
        a22[0][1] = 20
        assert a22.tolist() == [[1, 20], [3, 4]]

    def test_view_is_live(self, a22):
        row = a22[1]
        a22[1, 0] = 30
        assert row[0] == 30

    def test_view_equals_sequence(self, a22):
        assert a22[0] == [1, 2]
        assert a22[0] == (1, 2)
        assert a22[0] != [2, 1]

    def test_view_column_bounds(self, a22):
        with pytest.raises(OutOfBoundsError):
            a22[0][2]
        with pytest.raises(OutOfBoundsError):
            a22[0][-1] = 0

    def test_view_invalidated_by_shrink(self, a22):
        row = a22[1]
        a22.resize(1, 2)
        with pytest.raises(OutOfBoundsError):
            row[0]

    def test_sequence_helpers(self, a23):
        row = a23[0]
        assert 2 in row
        assert row.index(3) == 2


class TestElementAccess:

    def test_read_cell(self, a23):
        assert a23[0, 0] == 1
        assert a23[1, 2] == 6

    def test_write_cell(self, a23):
        a23[1, 1] = 50
        assert a23.row(1) == (4, 50, 6)

    def test_row_copy_is_read_only(self, a22):
        row = a22.row(0)
        assert row == (1, 2)
        with pytest.raises(TypeError):
            row[0] = 9  # type: ignore[index]

    def test_assign_whole_row(self, a22):
        a22[0] = [7, 8]
        assert a22.tolist() == [[7, 8], [3, 4]]

    def test_assign_row_wrong_length(self, a22):
        with pytest.raises(ShapeMismatchError):
            a22[0] = [1, 2, 3]
        assert a22.tolist() == [[1, 2], [3, 4]]

    @pytest.mark.parametrize("key", [(2, 0), (0, 2), (-1, 0), (0, -1)])
    def test_out_of_bounds(self, a22, key):
        with pytest.raises(OutOfBoundsError):
            a22[key]

    def test_row_out_of_bounds(self, a22):
        with pytest.raises(OutOfBoundsError) as exc_info:
            a22[2]
        assert exc_info.value.axis == "row"
        assert exc_info.value.extent == 2

    def test_out_of_bounds_is_index_error(self):
        with pytest.raises(IndexError):
            Matrix()[0]

    def test_wrong_index_arity(self, a22):
        with pytest.raises(TypeError):
            a22[0, 0, 0]


class TestIteration:

    def test_len_is_rows(self, a23):
        assert len(a23) == 2

    def test_iter_yields_row_tuples(self, a23):
        assert list(a23) == [(1, 2, 3), (4, 5, 6)]

    def test_tolist_is_copy(self, a22):
        rows = a22.tolist()
        rows[0][0] = 0
        assert a22 == from_rows([[1, 2], [3, 4]])
