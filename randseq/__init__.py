"""
randseq: pseudo-random sequences drawn from statistical distributions.

A request names a count, a generator type (``general`` or ``secure``), a
distribution and up to two parameters. The service builds a fresh base
source for the type, seeds a NumPy-backed secondary source from one base
draw, binds a sampler to whichever source the distribution needs, and draws
``count`` values in order.

Example:
    import randseq

    service = randseq.SequenceService()
    values = service.generate(5, "secure", "beta", 2.0, 5.0)

    result = service.run(randseq.SampleRequest(count=3, distribution="gaussian"))
    print(result.to_dict())
"""

__version__ = "0.1.0"

# Config
from randseq.config import ServiceConfig

# Errors
from randseq.errors import (
    InvalidCount,
    InvalidParameter,
    RandSeqError,
    SamplingError,
    SequenceRequestError,
    UnknownDistribution,
    UnknownSourceType,
)

# Error boundary
from randseq.response import ErrorDetails, error_details

# Samplers
from randseq.samplers import DISTRIBUTION_NAMES, Sampler, SamplerRegistry

# Service
from randseq.service import SequenceService

# Sources
from randseq.sources import (
    NumpySource,
    RandomSourceBridge,
    SourceType,
    StdlibSource,
    create_base_source,
    create_secondary_source,
)

# Types (public)
from randseq.types import SampleRequest, SequenceResult

__all__ = [
    # Version
    "__version__",
    # Types
    "SampleRequest",
    "SequenceResult",
    # Config
    "ServiceConfig",
    # Service
    "SequenceService",
    # Sources
    "SourceType",
    "StdlibSource",
    "NumpySource",
    "RandomSourceBridge",
    "create_base_source",
    "create_secondary_source",
    # Samplers
    "Sampler",
    "SamplerRegistry",
    "DISTRIBUTION_NAMES",
    # Errors
    "RandSeqError",
    "SequenceRequestError",
    "InvalidCount",
    "UnknownSourceType",
    "UnknownDistribution",
    "InvalidParameter",
    "SamplingError",
    "ErrorDetails",
    "error_details",
]
