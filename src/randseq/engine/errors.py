"""Validation errors raised while configuring a random sequence generator."""

from __future__ import annotations


class GenerationError(ValueError):
    """Base class for invalid generation parameters."""


class NonIntegerBoundError(GenerationError):
    """Raised when min or max is not an integer."""


class InvalidRangeError(GenerationError):
    """Raised when min is not strictly below max."""


class InvalidAmountError(GenerationError):
    """Raised when amount is not a positive integer."""


class RangeTooSmallError(GenerationError):
    """Raised when the range cannot hold enough distinct values for a unique run."""


class UnsafeBoundError(InvalidRangeError):
    """Raised when min or max falls outside the safe integer range."""
