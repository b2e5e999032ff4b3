"""
Core protocols for densematrix.

These define the structural interfaces that callers plug into a Matrix.
We use Protocol (structural typing) rather than ABC (nominal typing) so
plain functions, lambdas and third-party objects such as
numpy.random.Generator satisfy them without registration.
"""

from collections.abc import Sequence
from typing import Callable, Protocol, TypeVar, runtime_checkable

T = TypeVar('T')  # Element type

# Populates cell (row_index, col_index)
Generator = Callable[[int, int], T]

# Cellwise map used by Matrix.apply
ElementTransform = Callable[[T], T]

# Element constructor: dtype(0), dtype(1), dtype(sample)
ElementType = Callable[[object], T]


@runtime_checkable
class RandomSource(Protocol):
    """
    Producer of uniform real samples for randomized initialization.

    numpy.random.Generator implements this protocol, so
    ``np.random.default_rng(seed)`` can be passed anywhere a RandomSource
    is accepted.
    """

    def uniform(self, low: float, high: float, size: int) -> Sequence[float]:
        """
        Draw ``size`` independent samples uniformly from [low, high].

        Args:
            low: Lower bound
            high: Upper bound
            size: Number of samples

        Returns:
            A sequence of ``size`` floats
        """
        ...
