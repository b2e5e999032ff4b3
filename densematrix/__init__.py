"""
densematrix: generic dense two-dimensional matrices for Python.

A small, readable matrix value type for numerical work where correctness
matters more than BLAS throughput: addition, scaling, matrix and
Hadamard products, transpose, slicing, concatenation, elementwise
transforms and random initialization over any numeric element type.

Submodules:
    matrix: The Matrix type, factories and concatenation
    core: Exceptions, validation, protocols, tolerances and settings
"""

import logging

__version__ = "0.1.0"

from densematrix.core import (
    MatrixError,
    ValidationError,
    InvalidShapeError,
    ShapeMismatchError,
    OutOfBoundsError,
    RandomSource,
    debug_mode,
    set_debug,
    set_debug_sink,
)
from densematrix.matrix import (
    Matrix,
    Shape,
    from_array,
    from_rows,
    horizontal,
    identity,
    ones,
    vertical,
    zeros,
)

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Types
    "Matrix",
    "Shape",
    "RandomSource",
    # Factories
    "zeros",
    "ones",
    "identity",
    "from_rows",
    "from_array",
    # Concatenation
    "horizontal",
    "vertical",
    # Exceptions
    "MatrixError",
    "ValidationError",
    "InvalidShapeError",
    "ShapeMismatchError",
    "OutOfBoundsError",
    # Settings
    "debug_mode",
    "set_debug",
    "set_debug_sink",
]
