"""
Core types for randseq (PUBLIC).

- SampleRequest: One immutable generation request
- SequenceResult: The generated sequence and the request fields it answers
- json_number: JSON spelling of a sample, including non-finite values
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SampleRequest:
    """
    A single sequence generation request.

    Attributes:
        count: Number of samples to draw.
        source_type: ``"general"`` or ``"secure"``.
        distribution: Distribution name (case-insensitive).
        param1: First distribution parameter, or None for its default.
        param2: Second distribution parameter, or None for its default.
    """

    count: int
    source_type: str = "general"
    distribution: str = "uniform"
    param1: float | None = None
    param2: float | None = None


@dataclass(frozen=True)
class SequenceResult:
    """
    Successful response to a SampleRequest.

    ``type`` and ``distribution`` echo the request as the caller wrote them.
    """

    type: str
    count: int
    distribution: str
    sequence: list[float]

    def to_dict(self, json_safe: bool = False) -> dict[str, Any]:
        """
        Return the result as a dict.

        With *json_safe*, non-finite samples are written as the strings
        ``"Infinity"``, ``"-Infinity"`` and ``"NaN"``, since JSON has no
        literal for them.
        """
        sequence = list(self.sequence)
        if json_safe:
            sequence = [json_number(v) for v in sequence]
        return {
            "type": self.type,
            "count": self.count,
            "distribution": self.distribution,
            "sequence": sequence,
        }


def json_number(value: float) -> float | str:
    """Return *value* unchanged if finite, else its JSON string spelling."""
    if math.isfinite(value):
        return value
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"
