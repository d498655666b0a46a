"""
Secondary random source backed by a NumPy Generator.

The secondary source supplies the algorithm suite (gamma, beta, Student-t,
binomial, ...) that the base sources lack. It is always seeded explicitly,
so identical seeds yield identical sequences.
"""

from __future__ import annotations

import numpy as np


class NumpySource:
    """
    RandomSource backed by ``numpy.random.Generator`` (PCG64).

    Attributes:
        seed: The seed this source was created with.
        generator: The underlying Generator, used by samplers that need
            more than the three shared primitives.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._generator = np.random.default_rng(seed)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def generator(self) -> np.random.Generator:
        return self._generator

    def uniform(self) -> float:
        return float(self._generator.random())

    def gaussian(self) -> float:
        return float(self._generator.standard_normal())

    def next_int64(self) -> int:
        return int(self._generator.bit_generator.random_raw())

    def __repr__(self) -> str:
        return f"NumpySource(seed={self._seed})"


def create_secondary_source(seed: int) -> NumpySource:
    """
    Create a secondary source from an explicit seed.

    Args:
        seed: Non-negative integer, normally one 64-bit draw from the base source.

    Returns:
        A new NumpySource.
    """
    if seed < 0:
        raise ValueError(f"Secondary seed must be non-negative, got {seed}")
    return NumpySource(seed)
