"""
Matrix concatenation.

Both functions return a fresh matrix with the left operand's dtype and
raise ShapeMismatchError when the joined axis does not line up.
"""

from __future__ import annotations

from densematrix.core.validation import check_axis_match
from densematrix.matrix.matrix import Matrix


def horizontal(a: Matrix, b: Matrix) -> Matrix:
    """
    Place b to the right of a.

    Requires a.rows == b.rows. Result shape is (a.rows, a.cols + b.cols).
    """
    Matrix._require_matrix(a, 'horizontal')
    Matrix._require_matrix(b, 'horizontal')
    check_axis_match(a.shape, b.shape, 0, 'horizontal')
    a_rows, b_rows = a.tolist(), b.tolist()
    data = []
    for left, right in zip(a_rows, b_rows):
        data.extend(left)
        data.extend(right)
    return Matrix._from_buffer(a.rows, a.cols + b.cols, data, a.dtype)


def vertical(a: Matrix, b: Matrix) -> Matrix:
    """
    Place b below a.

    Requires a.cols == b.cols. Result shape is (a.rows + b.rows, a.cols).
    """
    Matrix._require_matrix(a, 'vertical')
    Matrix._require_matrix(b, 'vertical')
    check_axis_match(a.shape, b.shape, 1, 'vertical')
    data = [cell for row in a for cell in row]
    data.extend(cell for row in b for cell in row)
    return Matrix._from_buffer(a.rows + b.rows, a.cols, data, a.dtype)
