"""
RandomSourceBridge: the base and secondary sources of a single request.
"""

from __future__ import annotations

import logging
from typing import Callable

from randseq.sources.base import RandomSource
from randseq.sources.secondary import NumpySource, create_secondary_source

logger = logging.getLogger(__name__)

SecondaryProvider = Callable[[int], NumpySource]


class RandomSourceBridge:
    """
    Owns the base and secondary sources for one request.

    The secondary source is seeded from exactly one 64-bit draw off the base
    source, so a ``secure`` base makes every secondary-backed distribution
    unpredictable as well.

    Example:
        bridge = RandomSourceBridge(create_base_source("secure"))
        bridge.secondary.generator.gamma(2.0)
    """

    def __init__(
        self,
        base: RandomSource,
        secondary_provider: SecondaryProvider = create_secondary_source,
    ) -> None:
        self._base = base
        self._seed = base.next_int64()
        self._secondary = secondary_provider(self._seed)
        logger.debug("Seeded secondary source from base draw")

    @property
    def base(self) -> RandomSource:
        return self._base

    @property
    def secondary(self) -> NumpySource:
        return self._secondary

    @property
    def seed(self) -> int:
        """The 64-bit value drawn from the base source."""
        return self._seed

    def source(self, kind: str) -> RandomSource:
        """
        Return the source of the given kind.

        Args:
            kind: ``"base"`` or ``"secondary"``.
        """
        if kind == "base":
            return self._base
        if kind == "secondary":
            return self._secondary
        raise ValueError(f"Unknown source kind: {kind!r}")
