"""Mutable bounded value with carry forwarding.

A ``BoundedValue`` holds one settled integer.  Every assignment runs the
raw value through :func:`bounds.settle`; a non-zero carry is handed to
the ``left_digit`` (the more significant neighbour), which settles it in
turn and may carry further.  Chains are plain synchronous recursion.

Branches: ASSIGN-SETTLED, ASSIGN-CARRY-FORWARD, ASSIGN-CARRY-NO-NEIGHBOR
"""
from __future__ import annotations

import logging
import operator

from bounds import MAX_SAFE, MIN_SAFE, DigitBounds
from models import DigitSnapshot

logger = logging.getLogger(__name__)


class BoundedValue:
    """An integer that wraps around inside [min, max].

    The carry of the constructor's own settlement is recorded but never
    forwarded: no neighbour can be linked before the instance exists.
    ``left_digit`` is a plain reference; linking digits into a cycle
    recurses until Python gives up with ``RecursionError``.
    """

    def __init__(self, value: int = 0, min: int = MIN_SAFE, max: int = MAX_SAFE) -> None:
        self._bounds = DigitBounds(min=min, max=max)
        self._value, self._carry = self._bounds.settle(operator.index(value))
        self.left_digit: BoundedValue | None = None

    # -- state --------------------------------------------------------------

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, raw: int) -> None:
        self._value, self._carry = self._bounds.settle(operator.index(raw))
        if self._carry == 0:                                      # ASSIGN-SETTLED
            return

        neighbor = self.left_digit
        if neighbor is None:                                      # ASSIGN-CARRY-NO-NEIGHBOR
            return

        logger.debug("Forwarding carry %d from %r", self._carry, self)
        neighbor.accept_carry(self._carry)                        # ASSIGN-CARRY-FORWARD

    def set_value(self, raw: int) -> None:
        """Assign ``raw``, settling it and forwarding any carry."""
        self.value = raw

    def accept_carry(self, amount: int) -> None:
        """Called by the right-hand neighbour when it wraps.

        Adding the carry is itself an assignment, so this digit may wrap
        and pass a carry on to its own ``left_digit``.
        """
        self.value = self._value + amount

    @property
    def carry(self) -> int:
        """Signed count of ranges crossed by the most recent assignment.

        Positive: wrapped from the ``max`` side to the ``min`` side.
        Negative: wrapped from the ``min`` side to the ``max`` side.
        """
        return self._carry

    @property
    def bounds(self) -> DigitBounds:
        return self._bounds

    @property
    def min(self) -> int:
        return self._bounds.min

    @property
    def max(self) -> int:
        return self._bounds.max

    @property
    def range(self) -> int:
        """How many numbers fit between ``min`` and ``max`` inclusive."""
        return self._bounds.range

    def snapshot(self) -> DigitSnapshot:
        """Capture the current diagnostic state as a pydantic model."""
        return DigitSnapshot(
            value=self._value,
            min=self.min,
            max=self.max,
            range=self.range,
            carry=self._carry,
        )

    # -- comparison ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        # Only the held value counts, bounds do not.
        if not isinstance(other, BoundedValue):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other: BoundedValue | int) -> bool:
        return self._value < as_int(other)

    def __le__(self, other: BoundedValue | int) -> bool:
        return self._value <= as_int(other)

    def __gt__(self, other: BoundedValue | int) -> bool:
        return self._value > as_int(other)

    def __ge__(self, other: BoundedValue | int) -> bool:
        return self._value >= as_int(other)

    # -- conversion ---------------------------------------------------------

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(value={self._value}, min={self.min}, "
            f"max={self.max}, range={self.range}, carry={self._carry})"
        )


def as_int(operand: BoundedValue | int) -> int:
    """Unwrap a digit operand to its value; plain ints pass through."""
    if isinstance(operand, BoundedValue):
        return operand.value
    return operator.index(operand)
