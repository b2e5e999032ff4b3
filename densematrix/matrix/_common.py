"""
Shared types and argument handling for the matrix subpackage.

Shape: immutable (rows, cols) pair returned by Matrix.shape
parse_extent: resolves the (), (n, m) and (shape,) call forms used by
    constructors, factories, resize and randomized
"""

from __future__ import annotations

from typing import Any, NamedTuple

from densematrix.core.exceptions import InvalidShapeError
from densematrix.core.validation import check_dimension, check_shape


class Shape(NamedTuple):
    """Extent of a matrix."""
    rows: int
    cols: int


def parse_extent(args: tuple[Any, ...], name: str) -> Shape | None:
    """
    Resolve positional dimension arguments.

    Accepted forms:
        ()          -> None (caller decides the default)
        (n, m)      -> Shape(n, m)
        (shape,)    -> Shape(*shape), shape being any length-2 sequence

    Args:
        args: Positional arguments as received
        name: Caller name for error messages

    Returns:
        Validated Shape, or None for the empty form

    Raises:
        InvalidShapeError: For negative or non-integer dimensions, shapes
            of rank != 2, or any other argument count
    """
    if len(args) == 0:
        return None
    if len(args) == 1:
        return Shape(*check_shape(args[0], f"{name}: shape"))
    if len(args) == 2:
        return Shape(
            check_dimension(args[0], f"{name}: rows"),
            check_dimension(args[1], f"{name}: cols"),
        )
    raise InvalidShapeError(
        f"{name}: expected (rows, cols) or (shape,), got {len(args)} positional arguments",
        value=args,
    )
