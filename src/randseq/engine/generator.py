"""Bounded random integer sequences with optional uniqueness."""

from __future__ import annotations

import logging
import math
from numbers import Integral, Real
from typing import Literal

import numpy as np

from .errors import (
    InvalidAmountError,
    InvalidRangeError,
    NonIntegerBoundError,
    RangeTooSmallError,
    UnsafeBoundError,
)

logger = logging.getLogger(__name__)

MIN_SAFE_INTEGER = -(2**53 - 1)
MAX_SAFE_INTEGER = 2**53 - 1

# Unique runs shuffle the whole pool when range_size <= amount * DENSE_RANGE_FACTOR.
DENSE_RANGE_FACTOR = 2

Strategy = Literal["non_unique", "shuffle", "rejection"]


def _is_integer(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


class RandomSequenceGenerator:
    """Generate ``amount`` random integers in ``[min, max]``.

    Unique runs pick one of two strategies by range density. When the caller asks
    for a large share of the range, the full pool is shuffled with Fisher-Yates and
    truncated. Otherwise values are drawn and rejected on repeat until enough
    distinct ones are collected.

    All validation happens here. Once constructed, ``generate`` cannot fail.
    """

    def __init__(
        self,
        amount: int,
        min: int = MIN_SAFE_INTEGER,
        max: int = MAX_SAFE_INTEGER,
        is_unique: bool = False,
        *,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
        dense_factor: float = DENSE_RANGE_FACTOR,
    ) -> None:
        self._validate(amount, min, max, is_unique)
        if (
            isinstance(dense_factor, bool)
            or not isinstance(dense_factor, Real)
            or not math.isfinite(dense_factor)
            or dense_factor <= 0
        ):
            raise ValueError("dense_factor must be a positive finite number.")

        self._amount = int(amount)
        self._min = int(min)
        self._max = int(max)
        self._is_unique = bool(is_unique)
        self._dense_factor = dense_factor
        self._rng = rng or np.random.default_rng(seed)

    @staticmethod
    def _validate(amount: object, min: object, max: object, is_unique: bool) -> None:
        if not _is_integer(min) or not _is_integer(max):
            raise NonIntegerBoundError("Min and max must be integers.")
        min, max = int(min), int(max)
        if min < MIN_SAFE_INTEGER or max > MAX_SAFE_INTEGER:
            raise UnsafeBoundError(
                f"Min and max must lie within [{MIN_SAFE_INTEGER}, {MAX_SAFE_INTEGER}]."
            )
        if min >= max:
            raise InvalidRangeError("Invalid range: min must be less than max.")
        if not _is_integer(amount) or amount <= 0:
            raise InvalidAmountError("Amount must be a positive integer.")
        if is_unique and amount > max - min + 1:
            raise RangeTooSmallError("Cannot generate unique numbers: range too small.")

    @property
    def amount(self) -> int:
        return self._amount

    @property
    def min(self) -> int:
        return self._min

    @property
    def max(self) -> int:
        return self._max

    @property
    def is_unique(self) -> bool:
        return self._is_unique

    @property
    def range_size(self) -> int:
        """Number of integers in the inclusive range."""
        return self._max - self._min + 1

    @property
    def strategy(self) -> Strategy:
        """Name of the algorithm ``generate`` will use."""
        if not self._is_unique:
            return "non_unique"
        if self.range_size <= self._amount * self._dense_factor:
            return "shuffle"
        return "rejection"

    def generate(self) -> list[int]:
        """Return a fresh sequence of ``amount`` integers."""
        strategy = self.strategy
        logger.debug(
            "Generating %d numbers in [%d, %d] using %s.",
            self._amount,
            self._min,
            self._max,
            strategy,
        )
        if strategy == "shuffle":
            return self._generate_shuffled()
        if strategy == "rejection":
            return self._generate_rejection()
        return [self._random_int(self._min, self._max) for _ in range(self._amount)]

    def _generate_shuffled(self) -> list[int]:
        pool = list(range(self._min, self._max + 1))
        self._shuffle(pool)
        return pool[: self._amount]

    def _generate_rejection(self) -> list[int]:
        # dict keeps insertion order, unlike set.
        seen: dict[int, None] = {}
        while len(seen) < self._amount:
            seen[self._random_int(self._min, self._max)] = None
        return list(seen)

    def _shuffle(self, values: list[int]) -> None:
        """Fisher-Yates in place."""
        for i in range(len(values) - 1, 0, -1):
            j = self._random_int(0, i)
            values[i], values[j] = values[j], values[i]

    def _random_int(self, low: int, high: int) -> int:
        span = high - low + 1
        offset = math.floor(float(self._rng.random()) * span)
        return low + (offset if offset < span else span - 1)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(amount={self._amount}, min={self._min}, "
            f"max={self._max}, is_unique={self._is_unique})"
        )
