"""
Factory functions for common matrices.

zeros / ones / identity build filled matrices from an element type;
from_rows / from_array convert existing nested sequences or numpy arrays.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from densematrix.core.exceptions import InvalidShapeError
from densematrix.core.protocols import ElementType
from densematrix.core.validation import check_dimension
from densematrix.matrix._common import parse_extent
from densematrix.matrix.matrix import Matrix


def _filled(args: tuple[Any, ...], value: Any, dtype: ElementType, name: str) -> Matrix:
    shape = parse_extent(args, name)
    if shape is None:
        raise InvalidShapeError(f"{name}: expected (rows, cols) or (shape,)")
    return Matrix._from_buffer(shape.rows, shape.cols, [value] * (shape.rows * shape.cols), dtype)


def zeros(*args: Any, dtype: ElementType = float) -> Matrix:
    """
    Matrix with every cell dtype(0).

    Call as zeros(n, m) or zeros(shape).
    """
    return _filled(args, dtype(0), dtype, 'zeros')


def ones(*args: Any, dtype: ElementType = float) -> Matrix:
    """
    Matrix with every cell dtype(1).

    Call as ones(n, m) or ones(shape).
    """
    return _filled(args, dtype(1), dtype, 'ones')


def identity(n: int, *, dtype: ElementType = float) -> Matrix:
    """Square n x n matrix with dtype(1) on the diagonal, dtype(0) elsewhere."""
    n = check_dimension(n, 'identity: n')
    one = dtype(1)
    data = [dtype(0)] * (n * n)
    for i in range(n):
        data[i * n + i] = one
    return Matrix._from_buffer(n, n, data, dtype)


def from_rows(rows: Sequence[Sequence[Any]], dtype: ElementType | None = None) -> Matrix:
    """
    Build a matrix from nested row sequences.

    Cells are copied as given, not converted.

    Args:
        rows: Sequence of equal-length row sequences
        dtype: Element constructor; None infers it from the first cell,
            falling back to float for an empty matrix

    Raises:
        InvalidShapeError: If rows is ragged or not a nested sequence
    """
    if isinstance(rows, (str, bytes)) or not isinstance(rows, Sequence):
        raise InvalidShapeError(
            f"from_rows: expected a sequence of rows, got {type(rows).__name__}",
            value=rows,
        )
    data: list[Any] = []
    n_cols = None
    for i, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise InvalidShapeError(
                f"from_rows: row {i} is {type(row).__name__}, expected a sequence",
                value=rows,
            )
        if n_cols is None:
            n_cols = len(row)
        elif len(row) != n_cols:
            raise InvalidShapeError(
                f"from_rows: row {i} has {len(row)} values, expected {n_cols}",
                value=rows,
            )
        data.extend(row)
    n_rows = len(rows)
    if dtype is None:
        dtype = type(data[0]) if data else float
    return Matrix._from_buffer(n_rows, n_cols or 0, data, dtype)


def from_array(array: ArrayLike, dtype: ElementType | None = None) -> Matrix:
    """
    Convert a 2-D array-like (numpy array, nested lists) into a Matrix.

    numpy scalars become Python scalars via ndarray.tolist().

    Args:
        array: 2-D array-like
        dtype: Element constructor; None maps the array's kind to
            int, float, complex or bool (anything else keeps the type of
            the first cell)

    Raises:
        InvalidShapeError: If the array is not 2-D
    """
    arr = np.asarray(array)
    if arr.ndim != 2:
        raise InvalidShapeError(
            f"from_array: expected 2D array, got {arr.ndim}D with shape {arr.shape}",
            value=arr.shape,
        )
    n_rows, n_cols = arr.shape
    data = arr.reshape(-1).tolist()
    if dtype is None:
        dtype = _KIND_TO_TYPE.get(arr.dtype.kind)
        if dtype is None:
            dtype = type(data[0]) if data else float
    return Matrix._from_buffer(n_rows, n_cols, data, dtype)


_KIND_TO_TYPE: dict[str, type] = {
    'b': bool,
    'i': int,
    'u': int,
    'f': float,
    'c': complex,
}
