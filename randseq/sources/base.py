"""
Base random sources: the generator selected directly by the request type.

- ``general``: ``random.Random`` (Mersenne Twister, seeded from OS entropy)
- ``secure``: ``random.SystemRandom`` (OS cryptographic generator)
"""

from __future__ import annotations

import random as stdlib_random
from enum import Enum
from typing import Protocol

from randseq.errors import UnknownSourceType


class SourceType(str, Enum):
    """Kind of base generator requested by the caller."""

    GENERAL = "general"
    SECURE = "secure"

    @classmethod
    def parse(cls, value: str | SourceType) -> SourceType:
        """
        Parse a source type, ignoring case.

        Raises:
            UnknownSourceType: If the value is not a recognized type.
        """
        if isinstance(value, SourceType):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise UnknownSourceType(value)


class RandomSource(Protocol):
    """The three primitives shared by base and secondary sources."""

    def uniform(self) -> float:
        """Draw a double uniformly from [0, 1)."""
        ...

    def gaussian(self) -> float:
        """Draw from the standard normal distribution."""
        ...

    def next_int64(self) -> int:
        """Draw an unsigned 64-bit integer."""
        ...


class StdlibSource:
    """
    RandomSource backed by a stdlib ``random.Random`` instance.

    Works with any ``random.Random`` subclass, including ``SystemRandom``.
    """

    def __init__(self, rng: stdlib_random.Random) -> None:
        self._rng = rng

    @property
    def rng(self) -> stdlib_random.Random:
        return self._rng

    def uniform(self) -> float:
        return self._rng.random()

    def gaussian(self) -> float:
        return self._rng.gauss(0.0, 1.0)

    def next_int64(self) -> int:
        return self._rng.getrandbits(64)

    def __repr__(self) -> str:
        return f"StdlibSource({type(self._rng).__name__})"


def create_base_source(source_type: str | SourceType) -> StdlibSource:
    """
    Create a fresh base source for one request.

    Args:
        source_type: ``"general"`` or ``"secure"`` (case-insensitive).

    Returns:
        A new StdlibSource. Never shared between requests.

    Raises:
        UnknownSourceType: If the type is not recognized.
    """
    kind = SourceType.parse(source_type)
    if kind is SourceType.SECURE:
        return StdlibSource(stdlib_random.SystemRandom())
    return StdlibSource(stdlib_random.Random())
