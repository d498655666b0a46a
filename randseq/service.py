"""
SequenceService: generate one ordered sequence per request.

The service keeps only immutable configuration and the sampler registry.
Sources, samplers and the output list are created inside each call, so a
single instance can serve concurrent requests.
"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Callable

from randseq.config import ServiceConfig
from randseq.errors import InvalidCount, SamplingError
from randseq.samplers.registry import SamplerRegistry
from randseq.sources.base import RandomSource, SourceType, create_base_source
from randseq.sources.bridge import RandomSourceBridge, SecondaryProvider
from randseq.sources.secondary import create_secondary_source
from randseq.types import SampleRequest, SequenceResult

logger = logging.getLogger(__name__)

BaseProvider = Callable[[SourceType], RandomSource]


class SequenceService:
    """
    Orchestrates sequence generation.

    Example:
        service = SequenceService()
        values = service.generate(5, "secure", "gamma", 2.0, 3.0)
    """

    def __init__(
        self,
        config: ServiceConfig | None = None,
        base_provider: BaseProvider = create_base_source,
        secondary_provider: SecondaryProvider = create_secondary_source,
    ) -> None:
        """
        Initialize the service.

        Args:
            config: Limits and defaults. Defaults to ``ServiceConfig()``.
            base_provider: Builds the base source for a parsed source type.
            secondary_provider: Builds the secondary source from a seed.
        """
        self._config = config or ServiceConfig()
        self._registry = SamplerRegistry(self._config.distributions)
        self._base_provider = base_provider
        self._secondary_provider = secondary_provider

    @property
    def config(self) -> ServiceConfig:
        return self._config

    @property
    def registry(self) -> SamplerRegistry:
        return self._registry

    def validate_count(self, count: object) -> int:
        """
        Check that *count* is a positive integer within ``max_count``.

        Raises:
            InvalidCount: If it is not.
        """
        if isinstance(count, bool) or not isinstance(count, Integral):
            raise InvalidCount(count, "Count must be a positive integer.")
        if count <= 0:
            raise InvalidCount(count, "Count must be positive.")
        if count > self._config.max_count:
            raise InvalidCount(
                count, f"Count cannot be greater than {self._config.max_count:,}"
            )
        return int(count)

    def generate(
        self,
        count: int,
        source_type: str | SourceType,
        distribution: str,
        param1: float | None = None,
        param2: float | None = None,
    ) -> list[float]:
        """
        Draw ``count`` samples from a distribution.

        The secondary source is always seeded from one base draw, even for
        distributions that sample from the base source.

        Args:
            count: Number of samples, 1..max_count.
            source_type: ``"general"`` or ``"secure"`` (case-insensitive).
            distribution: Distribution name (case-insensitive).
            param1: First distribution parameter, or None for its default.
            param2: Second distribution parameter, or None for its default.

        Returns:
            The samples in generation order.

        Raises:
            InvalidCount: If count is out of range.
            UnknownSourceType: If source_type is not recognized.
            UnknownDistribution: If the distribution is not enabled.
            InvalidParameter: If a parameter is outside its legal domain.
            SamplingError: If sampling fails after validation.
        """
        n = self.validate_count(count)
        kind = SourceType.parse(source_type)

        bridge = RandomSourceBridge(self._base_provider(kind), self._secondary_provider)
        sampler = self._registry.create(distribution, param1, param2, bridge)

        logger.debug(f"Generating {n} samples from {sampler.name} using {kind.value} source")
        try:
            sequence = [sampler.sample() for _ in range(n)]
        except Exception as e:
            logger.exception(f"Sampling failed for {sampler.to_dict()}")
            raise SamplingError("Sequence generation failed") from e

        return sequence

    def run(self, request: SampleRequest) -> SequenceResult:
        """
        Answer a SampleRequest.

        Returns:
            A SequenceResult echoing the request fields.
        """
        sequence = self.generate(
            request.count,
            request.source_type,
            request.distribution,
            request.param1,
            request.param2,
        )
        return SequenceResult(
            type=request.source_type,
            count=request.count,
            distribution=request.distribution,
            sequence=sequence,
        )
