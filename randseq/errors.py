"""
Error taxonomy for sequence generation.

Every error raised by randseq carries a ``classification`` that transports
map onto their own status vocabulary:

- ``client-error``: the request was invalid and can be corrected by the caller
- ``server-error``: generation failed for reasons outside the caller's control
"""

from __future__ import annotations

from typing import Iterable

CLIENT_ERROR = "client-error"
SERVER_ERROR = "server-error"


class RandSeqError(Exception):
    """Base class for all randseq errors."""

    classification: str = SERVER_ERROR


class SequenceRequestError(RandSeqError, ValueError):
    """A request field failed validation. Raised before any sampling begins."""

    classification = CLIENT_ERROR


class InvalidCount(SequenceRequestError):
    """The requested count is not a positive integer within the configured maximum."""

    def __init__(self, count: object, message: str) -> None:
        super().__init__(message)
        self.count = count


class UnknownSourceType(SequenceRequestError):
    """The source type is neither ``general`` nor ``secure``."""

    def __init__(self, source_type: object) -> None:
        super().__init__("Invalid type. Use 'secure' or 'general'.")
        self.source_type = source_type


class UnknownDistribution(SequenceRequestError):
    """The distribution name is not in the supported set."""

    def __init__(self, name: str, supported: Iterable[str]) -> None:
        self.name = name
        self.supported = tuple(supported)
        super().__init__(
            f"Invalid Distribution: {name}. "
            f"Use one of the supported types: {', '.join(self.supported)}."
        )


class InvalidParameter(SequenceRequestError):
    """
    A distribution parameter violated its legal domain.

    Attributes:
        distribution: The distribution being configured (e.g. "gaussian").
        parameter: Parameter name (e.g. "stddev").
        reason: Why the value was rejected (e.g. "must be positive").
        position: Request field the value came from ("param1" or "param2").
    """

    def __init__(
        self,
        distribution: str,
        parameter: str,
        reason: str,
        position: str | None = None,
    ) -> None:
        self.distribution = distribution
        self.parameter = parameter
        self.reason = reason
        self.position = position
        where = f" ({position})" if position else ""
        super().__init__(f"{distribution.capitalize()} '{parameter}'{where} {reason}.")


class SamplingError(RandSeqError):
    """Sampling failed after validation succeeded. Never carries a partial sequence."""

    classification = SERVER_ERROR
