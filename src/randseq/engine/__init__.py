"""Random sequence engine."""

from .errors import (
    GenerationError,
    InvalidAmountError,
    InvalidRangeError,
    NonIntegerBoundError,
    RangeTooSmallError,
    UnsafeBoundError,
)
from .generator import (
    DENSE_RANGE_FACTOR,
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    RandomSequenceGenerator,
)
from .stream import RandomNumberStream, StreamResult, pipe, submit_pipe

__all__ = [
    "DENSE_RANGE_FACTOR",
    "GenerationError",
    "InvalidAmountError",
    "InvalidRangeError",
    "MAX_SAFE_INTEGER",
    "MIN_SAFE_INTEGER",
    "NonIntegerBoundError",
    "RandomNumberStream",
    "RandomSequenceGenerator",
    "RangeTooSmallError",
    "StreamResult",
    "UnsafeBoundError",
    "pipe",
    "submit_pipe",
]
