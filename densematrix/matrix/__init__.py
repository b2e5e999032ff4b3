"""
densematrix dense matrix type.

Usage:
    from densematrix.matrix import Matrix, zeros, identity, horizontal

    A = Matrix(2, 3, lambda i, j: i + j)
    B = horizontal(A, zeros(2, 1))
    C = A.transpose() * A
"""

from densematrix.matrix._common import Shape
from densematrix.matrix.matrix import Matrix, RowView, SLICE_DEFAULT
from densematrix.matrix.factories import (
    from_array,
    from_rows,
    identity,
    ones,
    zeros,
)
from densematrix.matrix.concat import horizontal, vertical
from densematrix.matrix.random import UNIFORM_HIGH, UNIFORM_LOW

__all__ = [
    "Shape",
    "Matrix",
    "RowView",
    "SLICE_DEFAULT",
    "zeros",
    "ones",
    "identity",
    "from_rows",
    "from_array",
    "horizontal",
    "vertical",
    "UNIFORM_LOW",
    "UNIFORM_HIGH",
]
