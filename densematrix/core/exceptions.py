"""
Exception hierarchy for densematrix.

All exceptions inherit from MatrixError so callers can catch any
library-specific error in one place. Every concrete error is a programmer
error: a violated precondition on shapes, indices or dimensions.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages state the operation and the actual vs expected values
    - Preconditions are checked before mutation, so no operation leaves
      partial state behind when it raises
"""


class MatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(MatrixError):
    """
    Argument validation failed.

    Base class for precondition violations detected before any
    computation or mutation takes place.
    """
    pass


class InvalidShapeError(ValidationError, ValueError):
    """
    A dimension or shape argument is not a valid rank-2 extent.

    Raised by constructors, factories and resize when a dimension is
    negative or not an integer, or when a shape does not have exactly
    two entries.

    Attributes:
        value: The offending argument, if available
    """

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value


class ShapeMismatchError(ValidationError, ValueError):
    """
    Operand shapes are incompatible for the requested operation.

    Raised by addition, subtraction, Hadamard product, matrix product
    and concatenation.

    Attributes:
        operation: Name of the operation that failed
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class OutOfBoundsError(ValidationError, IndexError):
    """
    An index or slice bound falls outside the matrix.

    Attributes:
        index: The offending index or bound
        extent: Size of the axis being indexed
        axis: 'row' or 'col'
    """

    def __init__(
        self,
        message: str,
        index: object = None,
        extent: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.extent = extent
        self.axis = axis
