"""Bounded random integer sequences with optional uniqueness."""

from randseq.config import GenerationParams, load_config, resolve_params
from randseq.engine import (
    GenerationError,
    InvalidAmountError,
    InvalidRangeError,
    NonIntegerBoundError,
    RandomNumberStream,
    RandomSequenceGenerator,
    RangeTooSmallError,
    StreamResult,
    UnsafeBoundError,
)

__version__ = "0.1.0"

__all__ = [
    "GenerationError",
    "GenerationParams",
    "InvalidAmountError",
    "InvalidRangeError",
    "NonIntegerBoundError",
    "RandomNumberStream",
    "RandomSequenceGenerator",
    "RangeTooSmallError",
    "StreamResult",
    "UnsafeBoundError",
    "load_config",
    "resolve_params",
]
