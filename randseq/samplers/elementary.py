"""
Samplers computed directly from the base source's primitives.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, ClassVar

from randseq.samplers.base import (
    BASE,
    ParameterSpec,
    describe,
    require,
    resolve_parameters,
)
from randseq.sources.base import RandomSource


@dataclass(frozen=True)
class UniformSampler:
    """Continuous uniform distribution over [low, high)."""

    name: ClassVar[str] = "uniform"
    source_kind: ClassVar[str] = BASE
    parameters: ClassVar[tuple[ParameterSpec, ...]] = (
        ParameterSpec("min", 0.0),
        ParameterSpec("max", 1.0),
    )

    low: float
    high: float
    source: RandomSource = field(repr=False, compare=False)

    def sample(self) -> float:
        return self.low + (self.high - self.low) * self.source.uniform()

    def to_dict(self) -> dict[str, Any]:
        return describe(self)

    @classmethod
    def create(
        cls,
        param1: float | None = None,
        param2: float | None = None,
        *,
        source: RandomSource,
    ) -> UniformSampler:
        low, high = resolve_parameters(cls.name, cls.parameters, param1, param2)
        require(low < high, cls.name, "min", "must be less than 'max' (param2)", "param1")
        require(
            math.isfinite(high - low),
            cls.name,
            "max",
            "must be within a finite distance of 'min' (param1)",
            "param2",
        )
        return cls(low=low, high=high, source=source)


@dataclass(frozen=True)
class GaussianSampler:
    """Normal distribution N(mean, stddev^2)."""

    name: ClassVar[str] = "gaussian"
    source_kind: ClassVar[str] = BASE
    parameters: ClassVar[tuple[ParameterSpec, ...]] = (
        ParameterSpec("mean", 0.0),
        ParameterSpec("stddev", 1.0),
    )

    mean: float
    stddev: float
    source: RandomSource = field(repr=False, compare=False)

    def sample(self) -> float:
        return self.mean + self.stddev * self.source.gaussian()

    def to_dict(self) -> dict[str, Any]:
        return describe(self)

    @classmethod
    def create(
        cls,
        param1: float | None = None,
        param2: float | None = None,
        *,
        source: RandomSource,
    ) -> GaussianSampler:
        mean, stddev = resolve_parameters(cls.name, cls.parameters, param1, param2)
        require(stddev > 0.0, cls.name, "stddev", "must be positive", "param2")
        return cls(mean=mean, stddev=stddev, source=source)


@dataclass(frozen=True)
class ExponentialSampler:
    """
    Exponential distribution with rate lambda, by inverse transform sampling.

    ``X = -(1 / rate) * ln(1 - U)``; since U is in [0, 1) the logarithm is
    always defined.
    """

    name: ClassVar[str] = "exponential"
    source_kind: ClassVar[str] = BASE
    parameters: ClassVar[tuple[ParameterSpec, ...]] = (ParameterSpec("lambda", 1.0),)

    rate: float
    source: RandomSource = field(repr=False, compare=False)

    def sample(self) -> float:
        return -1.0 / self.rate * math.log(1.0 - self.source.uniform())

    def to_dict(self) -> dict[str, Any]:
        return describe(self)

    @classmethod
    def create(
        cls,
        param1: float | None = None,
        param2: float | None = None,
        *,
        source: RandomSource,
    ) -> ExponentialSampler:
        (rate,) = resolve_parameters(cls.name, cls.parameters, param1)
        require(rate > 0.0, cls.name, "lambda", "must be positive", "param1")
        return cls(rate=rate, source=source)
