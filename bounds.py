"""
Bounds layer for digits.

A digit lives inside an inclusive integer domain [min, max].  Any raw
value that escapes the domain is *settled* back into it, and the number
of whole ranges crossed on the way is reported as a signed carry.

Branches: SETTLE-IN-RANGE, SETTLE-LOW-SINGLE, SETTLE-LOW-MULTI,
          SETTLE-HIGH-SINGLE, SETTLE-HIGH-MULTI
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import NamedTuple


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def truncdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero (not floor division).

    Python's ``//`` rounds toward negative infinity.  Machine integers
    truncate toward zero instead.
    """
    q, r = divmod(a, b)
    # divmod rounds toward -inf; adjust when the result is negative
    # and there is a remainder.
    if r != 0 and (a < 0) != (b < 0):
        q += 1
    return q


# Halving keeps ``max + 1``, ``min - 1`` and interval sums inside int64.
MIN_SAFE = truncdiv(INT64_MIN + 1, 2)
MAX_SAFE = truncdiv(INT64_MAX - 1, 2)


class InvalidBounds(ValueError):
    """Raised when a digit is given a max below its min."""

    def __init__(self, min: int, max: int) -> None:
        self.min = min
        self.max = max
        super().__init__(f"max ({max}) must be >= min ({min})")


class Settlement(NamedTuple):
    """A raw value mapped into bounds, plus the carry it produced."""

    value: int
    carry: int


def settle(raw: int, min: int, max: int) -> Settlement:
    """Map ``raw`` into [min, max] and count the ranges crossed.

    A positive carry means the value wrapped down from above ``max``,
    a negative one that it wrapped up from below ``min``.  The
    multi-range branches are not mirror images of each other: the low
    side takes ``range % interval`` and divides the interval, the high
    side takes ``interval % range`` and divides the raw value.
    """
    range_ = max - min + 1

    if min <= raw <= max:                                         # SETTLE-IN-RANGE
        return Settlement(raw, 0)

    if raw < min:
        interval = min - raw
        if interval <= range_:                                    # SETTLE-LOW-SINGLE
            return Settlement(max - interval + 1, -1)
        return Settlement(                                        # SETTLE-LOW-MULTI
            (max + 1) - range_ % interval,
            -truncdiv(interval, range_),
        )

    interval = raw - max
    if interval <= range_:                                        # SETTLE-HIGH-SINGLE
        return Settlement(min + interval - 1, 1)
    return Settlement(                                            # SETTLE-HIGH-MULTI
        (min + interval % range_) - 1,
        truncdiv(raw, range_),
    )


@dataclass(frozen=True)
class DigitBounds:
    """
    An inclusive integer domain [min, max] with wraparound semantics.

    Every settled digit value is produced by :meth:`settle` on one of
    these.
    """

    min: int = MIN_SAFE
    max: int = MAX_SAFE

    def __post_init__(self):
        object.__setattr__(self, "min", operator.index(self.min))
        object.__setattr__(self, "max", operator.index(self.max))
        if self.max < self.min:
            raise InvalidBounds(self.min, self.max)

    @property
    def range(self) -> int:
        """Total number of representable values."""
        return self.max - self.min + 1

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def settle(self, raw: int) -> Settlement:
        return settle(raw, self.min, self.max)


# ---------------------------------------------------------------------------
# Common bounds presets
# ---------------------------------------------------------------------------

UNBOUNDED = DigitBounds(min=MIN_SAFE, max=MAX_SAFE)
BIT = DigitBounds(min=0, max=1)
DECIMAL = DigitBounds(min=0, max=9)
SECONDS = DigitBounds(min=0, max=59)
MINUTES = DigitBounds(min=0, max=59)
HOURS = DigitBounds(min=0, max=23)
MONTHS = DigitBounds(min=1, max=12)
