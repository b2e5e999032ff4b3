"""
Argument validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than clamping, wrapping or
otherwise guessing what the caller meant.

Design principles:
    - No silent coercion (floats and bools are not dimensions)
    - Negative indices are errors, never reverse-indices
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator
from collections.abc import Sequence

from densematrix.core.exceptions import (
    InvalidShapeError,
    OutOfBoundsError,
    ShapeMismatchError,
)


def check_dimension(value: object, name: str) -> int:
    """
    Validate a single matrix dimension.

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        InvalidShapeError: If value is not a non-negative integer
    """
    if isinstance(value, bool):
        raise InvalidShapeError(f"{name}: expected int, got bool", value=value)
    try:
        dim = operator.index(value)
    except TypeError:
        raise InvalidShapeError(
            f"{name}: expected int, got {type(value).__name__}", value=value
        ) from None
    if dim < 0:
        raise InvalidShapeError(f"{name}: must be >= 0, got {dim}", value=value)
    return dim


def check_shape(shape: object, name: str) -> tuple[int, int]:
    """
    Validate a rank-2 shape.

    Args:
        shape: Candidate shape, any length-2 sequence of dimensions
        name: Parameter name for error messages

    Returns:
        (rows, cols) as plain ints

    Raises:
        InvalidShapeError: If shape is not a sequence of exactly two
            non-negative integers
    """
    if isinstance(shape, (str, bytes)) or not isinstance(shape, Sequence):
        raise InvalidShapeError(
            f"{name}: expected a (rows, cols) pair, got {type(shape).__name__}",
            value=shape,
        )
    if len(shape) != 2:
        raise InvalidShapeError(
            f"{name}: expected rank 2, got rank {len(shape)} ({tuple(shape)})",
            value=shape,
        )
    return (
        check_dimension(shape[0], f"{name}[0]"),
        check_dimension(shape[1], f"{name}[1]"),
    )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if tuple(left) != tuple(right):
        raise ShapeMismatchError(
            f"{operation}: shapes must match, got {tuple(left)} and {tuple(right)}",
            operation=operation,
            left_shape=tuple(left),
            right_shape=tuple(right),
        )


def check_inner_dims(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify left.cols == right.rows for a matrix product.

    Raises:
        ShapeMismatchError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise ShapeMismatchError(
            f"{operation}: left has {left[1]} columns but right has "
            f"{right[0]} rows (shapes {tuple(left)} and {tuple(right)})",
            operation=operation,
            left_shape=tuple(left),
            right_shape=tuple(right),
        )


def check_axis_match(
    left: tuple[int, int],
    right: tuple[int, int],
    axis: int,
    operation: str,
) -> None:
    """
    Verify two shapes agree along one axis (0 for rows, 1 for cols).

    Raises:
        ShapeMismatchError: If the extents along axis differ
    """
    if left[axis] != right[axis]:
        label = "rows" if axis == 0 else "columns"
        raise ShapeMismatchError(
            f"{operation}: {label} must match, got {left[axis]} and "
            f"{right[axis]} (shapes {tuple(left)} and {tuple(right)})",
            operation=operation,
            left_shape=tuple(left),
            right_shape=tuple(right),
        )


def check_index(index: object, extent: int, axis: str) -> int:
    """
    Validate an element index along one axis.

    Args:
        index: Candidate index
        extent: Size of the axis
        axis: 'row' or 'col', used in error messages

    Returns:
        The index as a plain int

    Raises:
        OutOfBoundsError: If index is not an integer in [0, extent)
    """
    if isinstance(index, bool):
        raise OutOfBoundsError(
            f"{axis} index: expected int, got bool", index=index, extent=extent, axis=axis
        )
    try:
        i = operator.index(index)
    except TypeError:
        raise OutOfBoundsError(
            f"{axis} index: expected int, got {type(index).__name__}",
            index=index, extent=extent, axis=axis,
        ) from None
    if not 0 <= i < extent:
        raise OutOfBoundsError(
            f"{axis} index {i} out of range [0, {extent})",
            index=i, extent=extent, axis=axis,
        )
    return i


def check_slice_bounds(
    lower: int,
    upper: int,
    extent: int,
    axis: str,
) -> None:
    """
    Verify a resolved half-open range satisfies 0 <= lower <= upper <= extent.

    Raises:
        OutOfBoundsError: If the range escapes the axis or is reversed
    """
    if lower < 0 or lower > extent:
        raise OutOfBoundsError(
            f"{axis} slice start {lower} out of range [0, {extent}]",
            index=lower, extent=extent, axis=axis,
        )
    if upper < lower or upper > extent:
        raise OutOfBoundsError(
            f"{axis} slice stop {upper} out of range [{lower}, {extent}]",
            index=upper, extent=extent, axis=axis,
        )
