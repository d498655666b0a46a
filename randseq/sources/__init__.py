"""
Sources module: per-request pseudo-random sources.

Provides:

- SourceType / create_base_source: the caller-selected base generator
- NumpySource / create_secondary_source: the seeded NumPy generator
- RandomSourceBridge: pairs both for one request
"""

from randseq.sources.base import (
    RandomSource,
    SourceType,
    StdlibSource,
    create_base_source,
)
from randseq.sources.bridge import RandomSourceBridge
from randseq.sources.secondary import NumpySource, create_secondary_source

__all__ = [
    "RandomSource",
    "SourceType",
    "StdlibSource",
    "create_base_source",
    "NumpySource",
    "create_secondary_source",
    "RandomSourceBridge",
]
