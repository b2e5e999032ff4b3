"""
Tolerance tiers for approximate matrix comparison.

Defines precision expectations per element type:
- Exact types (int, Fraction, Decimal): zero tolerance
- FP64 (Python float, numpy float64): machine-precision match
- FP32 (numpy float32): relaxed for single-precision arithmetic

Used by Matrix.allclose and by the test suite.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact element types: cells must compare equal',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision: accumulated rounding only',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision: relaxed',
)


def select_tolerance(dtype: object) -> ToleranceTier:
    """Select the tolerance tier for an element type."""
    if dtype is np.float32 or dtype is np.float16:
        return FP32
    if dtype in (float, complex, np.float64, np.complex128):
        return FP64
    if isinstance(dtype, type) and issubclass(dtype, (np.floating, np.complexfloating)):
        return FP64
    return EXACT
