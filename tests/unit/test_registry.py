"""Tests for the sampler registry."""

from __future__ import annotations

import random

import pytest

from randseq.errors import InvalidParameter, UnknownDistribution
from randseq.samplers import (
    DISTRIBUTION_NAMES,
    BinomialSampler,
    GammaSampler,
    SamplerRegistry,
    UniformSampler,
)
from randseq.sources import RandomSourceBridge, StdlibSource


def make_bridge(seed: int = 0) -> RandomSourceBridge:
    return RandomSourceBridge(StdlibSource(random.Random(seed)))


class TestSamplerRegistry:
    """Tests for SamplerRegistry."""

    def test_all_ten_distributions_registered(self):
        assert set(DISTRIBUTION_NAMES) == {
            "uniform",
            "gaussian",
            "exponential",
            "gamma",
            "lognormal",
            "beta",
            "weibull",
            "cauchy",
            "t-student",
            "binomial",
        }
        assert SamplerRegistry().names() == list(DISTRIBUTION_NAMES)

    @pytest.mark.parametrize("name", ["GAMMA", "Gamma", " gamma "])
    def test_lookup_case_insensitive(self, name):
        assert SamplerRegistry().entry(name) is GammaSampler

    def test_unknown_distribution_lists_supported(self):
        with pytest.raises(UnknownDistribution) as exc_info:
            SamplerRegistry().entry("poisson")
        err = exc_info.value
        assert err.name == "poisson"
        assert err.supported == DISTRIBUTION_NAMES
        assert "poisson" in str(err)
        assert "t-student" in str(err)

    def test_base_distributions_bind_base_source(self):
        bridge = make_bridge()
        sampler = SamplerRegistry().create("uniform", None, None, bridge)
        assert isinstance(sampler, UniformSampler)
        assert sampler.source is bridge.base

    @pytest.mark.parametrize(
        "name",
        ["gamma", "lognormal", "beta", "weibull", "cauchy", "t-student", "binomial"],
    )
    def test_secondary_distributions_bind_secondary_source(self, name):
        bridge = make_bridge()
        sampler = SamplerRegistry().create(name, None, None, bridge)
        assert sampler.source is bridge.secondary

    def test_every_distribution_samples_with_defaults(self):
        registry = SamplerRegistry()
        for name in registry.names():
            sampler = registry.create(name, None, None, make_bridge())
            assert isinstance(sampler.sample(), float)

    def test_validation_errors_propagate(self):
        with pytest.raises(InvalidParameter):
            SamplerRegistry().create("binomial", 1.5, 0.5, make_bridge())

    def test_restricted_registry(self):
        registry = SamplerRegistry(["Uniform", "binomial"])
        assert registry.names() == ["uniform", "binomial"]
        assert registry.entry("binomial") is BinomialSampler
        with pytest.raises(UnknownDistribution) as exc_info:
            registry.entry("gamma")
        assert exc_info.value.supported == ("uniform", "binomial")

    def test_restricted_registry_rejects_unknown_names(self):
        with pytest.raises(ValueError, match="poisson"):
            SamplerRegistry(["uniform", "poisson"])

    def test_restricted_registry_rejects_empty(self):
        with pytest.raises(ValueError):
            SamplerRegistry([])

    def test_describe(self):
        catalog = {d["name"]: d for d in SamplerRegistry().describe()}
        assert catalog["binomial"] == {
            "name": "binomial",
            "source": "secondary",
            "parameters": [
                {"name": "trials", "default": 10.0},
                {"name": "probability", "default": 0.5},
            ],
        }
        assert catalog["exponential"]["source"] == "base"
        assert len(catalog["t-student"]["parameters"]) == 1
