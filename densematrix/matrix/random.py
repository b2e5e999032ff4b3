"""
Random sources for randomized initialization.

The default source is a fresh numpy Generator seeded from OS entropy on
every call, so two randomized() calls never share state. Pass an int seed
or an explicit RandomSource (e.g. np.random.default_rng(42)) for
reproducible fills.
"""

from __future__ import annotations

import numpy as np

from densematrix.core.protocols import RandomSource

UNIFORM_LOW: float = -5.0
UNIFORM_HIGH: float = 5.0


def resolve_source(rng: RandomSource | int | None) -> RandomSource:
    """
    Turn the ``rng`` argument of randomized() into a RandomSource.

    Args:
        rng: None for a nondeterministically seeded generator, an int seed,
            or any object implementing RandomSource

    Returns:
        A RandomSource

    Raises:
        TypeError: If rng is none of the accepted forms
    """
    if rng is None:
        return np.random.default_rng()
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        return np.random.default_rng(int(rng))
    if isinstance(rng, RandomSource):
        return rng
    raise TypeError(
        f"rng: expected None, an int seed or an object with uniform(), "
        f"got {type(rng).__name__}"
    )


def uniform_samples(source: RandomSource, size: int) -> list[float]:
    """
    Draw ``size`` samples on [UNIFORM_LOW, UNIFORM_HIGH] as Python floats.

    Samples are clipped to the closed interval so sources with inclusive
    or slightly overshooting upper bounds stay in range.
    """
    if size == 0:
        return []
    samples = np.asarray(source.uniform(UNIFORM_LOW, UNIFORM_HIGH, size), dtype=np.float64)
    if samples.shape != (size,):
        raise ValueError(
            f"random source returned shape {samples.shape}, expected ({size},)"
        )
    return np.clip(samples, UNIFORM_LOW, UNIFORM_HIGH).tolist()
