"""
Error boundary between the service and its transports.

Transports catch everything raised by ``SequenceService`` and turn it into
ErrorDetails. Client errors keep their message; anything else is reported
generically so internal details do not leak to callers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from randseq.errors import CLIENT_ERROR, SERVER_ERROR, RandSeqError

logger = logging.getLogger(__name__)

GENERIC_SERVER_MESSAGE = "An unexpected error occurred while generating the sequence."


@dataclass(frozen=True)
class ErrorDetails:
    """
    Structured error returned to callers.

    Attributes:
        message: Human-readable explanation.
        classification: ``"client-error"`` or ``"server-error"``.
        details: Transport context, such as the request path.
        timestamp: When the error was reported.
    """

    message: str
    classification: str
    details: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def is_client_error(self) -> bool:
        return self.classification == CLIENT_ERROR

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "message": self.message,
            "details": self.details,
            "classification": self.classification,
        }


def error_details(exc: BaseException, details: str = "") -> ErrorDetails:
    """
    Classify an exception raised while serving a request.

    Args:
        exc: The exception.
        details: Transport context (e.g. ``"uri=/api/v1/random/sequence"``).

    Returns:
        ErrorDetails for the caller.
    """
    if isinstance(exc, RandSeqError) and exc.classification == CLIENT_ERROR:
        return ErrorDetails(message=str(exc), classification=CLIENT_ERROR, details=details)

    if not isinstance(exc, RandSeqError):
        logger.error("Unhandled error while serving request", exc_info=exc)
    return ErrorDetails(
        message=GENERIC_SERVER_MESSAGE, classification=SERVER_ERROR, details=details
    )
