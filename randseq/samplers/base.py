"""
Shared sampler contract and parameter resolution.

Each distribution is a frozen dataclass holding its resolved parameters and
the one source it draws from. Parameters arrive as two optional positional
values (``param1``, ``param2``); each is resolved against its own default
before validation, never against the other parameter.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Protocol

from randseq.errors import InvalidParameter

BASE = "base"
SECONDARY = "secondary"


class Sampler(Protocol):
    """Bound capability producing one pseudo-random value per call."""

    name: str

    def sample(self) -> float:
        """Draw the next value."""
        ...

    def to_dict(self) -> dict[str, Any]:
        """Return the distribution name and its resolved parameters."""
        ...


@dataclass(frozen=True)
class ParameterSpec:
    """
    Name and default of one positional distribution parameter.

    Attributes:
        name: Human-readable name used in error messages (e.g. "stddev").
        default: Value used when the request omits the parameter.
    """

    name: str
    default: float


def resolve_parameters(
    distribution: str,
    specs: tuple[ParameterSpec, ...],
    *values: float | None,
) -> tuple[float, ...]:
    """
    Apply defaults to each positional parameter independently.

    Values beyond ``len(specs)`` are ignored. Supplied values must be finite.

    Args:
        distribution: Distribution name, for error messages.
        specs: Parameter specs in positional order.
        *values: The request's ``param1``, ``param2``.

    Returns:
        One resolved float per spec.

    Raises:
        InvalidParameter: If a supplied value is not a finite real number.
    """
    resolved = []
    for index, spec in enumerate(specs):
        value = values[index] if index < len(values) else None
        if value is None:
            resolved.append(spec.default)
            continue
        position = f"param{index + 1}"
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise InvalidParameter(
                distribution, spec.name, "must be a real number", position
            ) from None
        if not math.isfinite(number):
            raise InvalidParameter(distribution, spec.name, "must be finite", position)
        resolved.append(number)
    return tuple(resolved)


def require(
    condition: bool,
    distribution: str,
    parameter: str,
    reason: str,
    position: str | None = None,
) -> None:
    """Raise InvalidParameter unless *condition* holds."""
    if not condition:
        raise InvalidParameter(distribution, parameter, reason, position)


def describe(sampler: Any) -> dict[str, Any]:
    """Return ``{"distribution": name, <param>: value, ...}`` for a sampler dataclass."""
    data: dict[str, Any] = {"distribution": sampler.name}
    for f in fields(sampler):
        if f.name != "source":
            data[f.name] = getattr(sampler, f.name)
    return data
