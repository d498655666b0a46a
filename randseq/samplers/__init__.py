"""
Samplers module: one bound sampler per distribution family.

Provides:

- Sampler: the ``sample() -> float`` protocol
- SamplerRegistry: name -> sampler lookup with parameter validation
- The ten distribution samplers
"""

from randseq.samplers.base import ParameterSpec, Sampler
from randseq.samplers.elementary import (
    ExponentialSampler,
    GaussianSampler,
    UniformSampler,
)
from randseq.samplers.library import (
    BetaSampler,
    BinomialSampler,
    CauchySampler,
    GammaSampler,
    LogNormalSampler,
    StudentTSampler,
    WeibullSampler,
)
from randseq.samplers.registry import DISTRIBUTION_NAMES, SamplerRegistry

__all__ = [
    "Sampler",
    "ParameterSpec",
    "SamplerRegistry",
    "DISTRIBUTION_NAMES",
    "UniformSampler",
    "GaussianSampler",
    "ExponentialSampler",
    "GammaSampler",
    "LogNormalSampler",
    "BetaSampler",
    "WeibullSampler",
    "CauchySampler",
    "StudentTSampler",
    "BinomialSampler",
]
