"""
Core infrastructure for densematrix.

This module provides shared abstractions and utilities used by the
matrix subpackage.

Key components:
    protocols: Generator, ElementTransform, RandomSource
    exceptions: Exception hierarchy
    validation: Argument validators
    tolerances: Tolerance tiers for approximate comparison
    config: Runtime debug settings
"""

from densematrix.core.protocols import (
    ElementTransform,
    ElementType,
    Generator,
    RandomSource,
)
from densematrix.core.exceptions import (
    MatrixError,
    ValidationError,
    InvalidShapeError,
    ShapeMismatchError,
    OutOfBoundsError,
)
from densematrix.core.tolerances import ToleranceTier, select_tolerance
from densematrix.core.config import (
    Settings,
    debug_mode,
    get_settings,
    set_debug,
    set_debug_sink,
)

__all__ = [
    # Protocols
    "ElementTransform",
    "ElementType",
    "Generator",
    "RandomSource",
    # Exceptions
    "MatrixError",
    "ValidationError",
    "InvalidShapeError",
    "ShapeMismatchError",
    "OutOfBoundsError",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
    # Config
    "Settings",
    "debug_mode",
    "get_settings",
    "set_debug",
    "set_debug_sink",
]
