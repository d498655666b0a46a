"""
Samplers backed by the secondary NumPy source.

These distributions need rejection or transformation algorithms that the
base sources do not provide, so they draw from ``NumpySource.generator``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, ClassVar

from randseq.samplers.base import (
    SECONDARY,
    ParameterSpec,
    describe,
    require,
    resolve_parameters,
)
from randseq.sources.secondary import NumpySource

# numpy draws binomial trial counts as int64
_MAX_TRIALS = 2.0**63


@dataclass(frozen=True)
class GammaSampler:
    """Gamma distribution with shape k and scale theta."""

    name: ClassVar[str] = "gamma"
    source_kind: ClassVar[str] = SECONDARY
    parameters: ClassVar[tuple[ParameterSpec, ...]] = (
        ParameterSpec("shape", 1.0),
        ParameterSpec("scale", 1.0),
    )

    shape: float
    scale: float
    source: NumpySource = field(repr=False, compare=False)

    def sample(self) -> float:
        return float(self.source.generator.gamma(self.shape, self.scale))

    def to_dict(self) -> dict[str, Any]:
        return describe(self)

    @classmethod
    def create(
        cls,
        param1: float | None = None,
        param2: float | None = None,
        *,
        source: NumpySource,
    ) -> GammaSampler:
        shape, scale = resolve_parameters(cls.name, cls.parameters, param1, param2)
        require(shape > 0.0, cls.name, "shape", "must be positive", "param1")
        require(scale > 0.0, cls.name, "scale", "must be positive", "param2")
        return cls(shape=shape, scale=scale, source=source)


@dataclass(frozen=True)
class LogNormalSampler:
    """Log-normal distribution: exp of a normal draw with mean mu and deviation sigma."""

    name: ClassVar[str] = "lognormal"
    source_kind: ClassVar[str] = SECONDARY
    parameters: ClassVar[tuple[ParameterSpec, ...]] = (
        ParameterSpec("mu", 0.0),
        ParameterSpec("sigma", 1.0),
    )

    mu: float
    sigma: float
    source: NumpySource = field(repr=False, compare=False)

    def sample(self) -> float:
        return float(self.source.generator.lognormal(self.mu, self.sigma))

    def to_dict(self) -> dict[str, Any]:
        return describe(self)

    @classmethod
    def create(
        cls,
        param1: float | None = None,
        param2: float | None = None,
        *,
        source: NumpySource,
    ) -> LogNormalSampler:
        mu, sigma = resolve_parameters(cls.name, cls.parameters, param1, param2)
        require(sigma > 0.0, cls.name, "sigma", "must be positive", "param2")
        return cls(mu=mu, sigma=sigma, source=source)


@dataclass(frozen=True)
class BetaSampler:
    """Beta distribution on [0, 1]. Beta(1, 1) is the standard uniform."""

    name: ClassVar[str] = "beta"
    source_kind: ClassVar[str] = SECONDARY
    parameters: ClassVar[tuple[ParameterSpec, ...]] = (
        ParameterSpec("alpha", 1.0),
        ParameterSpec("beta", 1.0),
    )

    alpha: float
    beta: float
    source: NumpySource = field(repr=False, compare=False)

    def sample(self) -> float:
        return float(self.source.generator.beta(self.alpha, self.beta))

    def to_dict(self) -> dict[str, Any]:
        return describe(self)

    @classmethod
    def create(
        cls,
        param1: float | None = None,
        param2: float | None = None,
        *,
        source: NumpySource,
    ) -> BetaSampler:
        alpha, beta = resolve_parameters(cls.name, cls.parameters, param1, param2)
        require(alpha > 0.0, cls.name, "alpha", "must be positive", "param1")
        require(beta > 0.0, cls.name, "beta", "must be positive", "param2")
        return cls(alpha=alpha, beta=beta, source=source)


@dataclass(frozen=True)
class WeibullSampler:
    """Weibull distribution with shape k and scale lambda."""

    name: ClassVar[str] = "weibull"
    source_kind: ClassVar[str] = SECONDARY
    parameters: ClassVar[tuple[ParameterSpec, ...]] = (
        ParameterSpec("shape", 1.0),
        ParameterSpec("scale", 1.0),
    )

    shape: float
    scale: float
    source: NumpySource = field(repr=False, compare=False)

    def sample(self) -> float:
        # numpy's weibull is the one-parameter form with unit scale
        return self.scale * float(self.source.generator.weibull(self.shape))

    def to_dict(self) -> dict[str, Any]:
        return describe(self)

    @classmethod
    def create(
        cls,
        param1: float | None = None,
        param2: float | None = None,
        *,
        source: NumpySource,
    ) -> WeibullSampler:
        shape, scale = resolve_parameters(cls.name, cls.parameters, param1, param2)
        require(shape > 0.0, cls.name, "shape", "must be positive (k > 0)", "param1")
        require(scale > 0.0, cls.name, "scale", "must be positive (lambda > 0)", "param2")
        return cls(shape=shape, scale=scale, source=source)


@dataclass(frozen=True)
class CauchySampler:
    """
    Cauchy distribution by inverse transform sampling.

    ``X = location + scale * tan(pi * (U - 0.5))``
    """

    name: ClassVar[str] = "cauchy"
    source_kind: ClassVar[str] = SECONDARY
    parameters: ClassVar[tuple[ParameterSpec, ...]] = (
        ParameterSpec("location", 0.0),
        ParameterSpec("scale", 1.0),
    )

    location: float
    scale: float
    source: NumpySource = field(repr=False, compare=False)

    def sample(self) -> float:
        return self.location + self.scale * math.tan(math.pi * (self.source.uniform() - 0.5))

    def to_dict(self) -> dict[str, Any]:
        return describe(self)

    @classmethod
    def create(
        cls,
        param1: float | None = None,
        param2: float | None = None,
        *,
        source: NumpySource,
    ) -> CauchySampler:
        location, scale = resolve_parameters(cls.name, cls.parameters, param1, param2)
        require(scale > 0.0, cls.name, "scale", "must be positive (gamma > 0)", "param2")
        return cls(location=location, scale=scale, source=source)


@dataclass(frozen=True)
class StudentTSampler:
    """Student's t-distribution with nu degrees of freedom. param2 is ignored."""

    name: ClassVar[str] = "t-student"
    source_kind: ClassVar[str] = SECONDARY
    parameters: ClassVar[tuple[ParameterSpec, ...]] = (
        ParameterSpec("degrees_of_freedom", 10.0),
    )

    degrees_of_freedom: float
    source: NumpySource = field(repr=False, compare=False)

    def sample(self) -> float:
        return float(self.source.generator.standard_t(self.degrees_of_freedom))

    def to_dict(self) -> dict[str, Any]:
        return describe(self)

    @classmethod
    def create(
        cls,
        param1: float | None = None,
        param2: float | None = None,
        *,
        source: NumpySource,
    ) -> StudentTSampler:
        (dof,) = resolve_parameters(cls.name, cls.parameters, param1)
        require(dof > 0.0, cls.name, "degrees_of_freedom", "must be positive (nu > 0)", "param1")
        return cls(degrees_of_freedom=dof, source=source)


@dataclass(frozen=True)
class BinomialSampler:
    """
    Binomial distribution: successes in ``trials`` Bernoulli trials.

    Samples are integers in [0, trials], returned as floats.
    """

    name: ClassVar[str] = "binomial"
    source_kind: ClassVar[str] = SECONDARY
    parameters: ClassVar[tuple[ParameterSpec, ...]] = (
        ParameterSpec("trials", 10.0),
        ParameterSpec("probability", 0.5),
    )

    trials: int
    probability: float
    source: NumpySource = field(repr=False, compare=False)

    def sample(self) -> float:
        return float(self.source.generator.binomial(self.trials, self.probability))

    def to_dict(self) -> dict[str, Any]:
        return describe(self)

    @classmethod
    def create(
        cls,
        param1: float | None = None,
        param2: float | None = None,
        *,
        source: NumpySource,
    ) -> BinomialSampler:
        trials, probability = resolve_parameters(cls.name, cls.parameters, param1, param2)
        require(
            trials > 0.0 and trials.is_integer(),
            cls.name,
            "trials",
            "must be a positive integer",
            "param1",
        )
        require(trials < _MAX_TRIALS, cls.name, "trials", "is too large", "param1")
        require(
            0.0 <= probability <= 1.0,
            cls.name,
            "probability",
            "must be between 0.0 and 1.0",
            "param2",
        )
        return cls(trials=int(trials), probability=probability, source=source)
