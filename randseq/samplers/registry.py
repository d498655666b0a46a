"""
SamplerRegistry: static mapping from distribution names to sampler factories.

Example:
    registry = SamplerRegistry()
    bridge = RandomSourceBridge(create_base_source("general"))
    sampler = registry.create("Gamma", 2.0, None, bridge)
    value = sampler.sample()
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from randseq.errors import UnknownDistribution
from randseq.samplers.base import Sampler
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
from randseq.sources.bridge import RandomSourceBridge

logger = logging.getLogger(__name__)

SAMPLERS: dict[str, type] = {
    cls.name: cls
    for cls in (
        UniformSampler,
        GaussianSampler,
        ExponentialSampler,
        GammaSampler,
        LogNormalSampler,
        BetaSampler,
        WeibullSampler,
        CauchySampler,
        StudentTSampler,
        BinomialSampler,
    )
}

DISTRIBUTION_NAMES: tuple[str, ...] = tuple(SAMPLERS)


def normalize_name(name: str) -> str:
    """Lower-case and strip a distribution name for lookup."""
    return name.strip().lower()


class SamplerRegistry:
    """
    Registry of the distributions a service is allowed to sample.

    Holds no per-request state; one instance can be shared by every request.
    """

    def __init__(self, names: Iterable[str] | None = None) -> None:
        """
        Initialize the registry.

        Args:
            names: Distribution names to enable. Defaults to all of them.

        Raises:
            ValueError: If a name is not a known distribution.
        """
        if names is None:
            self._entries = dict(SAMPLERS)
            return

        entries: dict[str, type] = {}
        for name in names:
            key = normalize_name(name)
            if key not in SAMPLERS:
                raise ValueError(
                    f"Unknown distribution {name!r} in configuration. "
                    f"Known distributions: {', '.join(DISTRIBUTION_NAMES)}"
                )
            entries[key] = SAMPLERS[key]
        if not entries:
            raise ValueError("At least one distribution must be enabled")
        self._entries = entries

    def names(self) -> list[str]:
        """Return the enabled distribution names, in registration order."""
        return list(self._entries)

    def entry(self, name: str) -> type:
        """
        Look up the sampler class for a distribution name (case-insensitive).

        Raises:
            UnknownDistribution: If the name is not enabled.
        """
        key = normalize_name(name) if isinstance(name, str) else name
        try:
            return self._entries[key]
        except (KeyError, TypeError):
            raise UnknownDistribution(str(name), self._entries) from None

    def create(
        self,
        name: str,
        param1: float | None,
        param2: float | None,
        bridge: RandomSourceBridge,
    ) -> Sampler:
        """
        Validate parameters and build a sampler bound to the right source.

        Args:
            name: Distribution name (case-insensitive).
            param1: First positional parameter, or None for its default.
            param2: Second positional parameter, or None for its default.
            bridge: The request's sources.

        Returns:
            A sampler for this request only.

        Raises:
            UnknownDistribution: If the name is not enabled.
            InvalidParameter: If a parameter is outside its legal domain.
        """
        sampler_cls = self.entry(name)
        source = bridge.source(sampler_cls.source_kind)
        sampler = sampler_cls.create(param1, param2, source=source)
        logger.debug(f"Built sampler {sampler.to_dict()}")
        return sampler

    def describe(self) -> list[dict[str, Any]]:
        """
        Describe each enabled distribution.

        Returns:
            One dict per distribution with ``name``, ``source`` and
            ``parameters`` (a list of ``{"name", "default"}`` in positional order).
        """
        return [
            {
                "name": name,
                "source": cls.source_kind,
                "parameters": [
                    {"name": spec.name, "default": spec.default}
                    for spec in cls.parameters
                ],
            }
            for name, cls in self._entries.items()
        ]
