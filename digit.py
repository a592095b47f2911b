"""Digit: operators and constructors on top of ``BoundedValue``.

Two disjoint operation families live here:

  * pure     - ``plus``/``minus``/``times``/``div`` and ``+ - * / //``
               build a *new* digit bounded like the left operand.  The
               new digit has no neighbour, so its carry is never sent
               anywhere.
  * mutating - ``plus_assign`` ... ``div_assign``, ``+= -= *= /= //=``,
               ``inc`` and ``dec`` assign to the receiver, which
               forwards any carry to its ``left_digit``.

Usage::

    minute = Digit.from_value(0, 59, value=59)
    hour = Digit.from_value(0, 23)
    minute.left_digit = hour
    minute += 1            # minute.value == 0, hour.value == 1

Division truncates toward zero like machine integers; dividing by zero
raises ``ZeroDivisionError`` before anything is modified.

Branches: DIV-NORMAL, DIV-ZERO
"""
from __future__ import annotations

from typing import Any

from bounded_value import BoundedValue, as_int
from bounds import MAX_SAFE, MIN_SAFE, DigitBounds, truncdiv
from models import DigitConfig


class Digit(BoundedValue):
    """A ``BoundedValue`` with arithmetic and named constructors."""

    # -- constructors -------------------------------------------------------

    @classmethod
    def from_value(
        cls, min: int = MIN_SAFE, max: int = MAX_SAFE, value: int | None = None
    ) -> Digit:
        """Digit in [min, max] starting at ``value`` (``min`` if omitted)."""
        return cls(min if value is None else value, min, max)

    @classmethod
    def from_value_and_range(cls, value: int, low: int, high: int) -> Digit:
        """Digit holding ``value`` inside the closed range [low, high]."""
        return cls(value, low, high)

    @classmethod
    def from_range(cls, low: int, high: int, value: int | None = None) -> Digit:
        """Digit over the closed range [low, high], starting at ``low`` by default."""
        return cls(low if value is None else value, low, high)

    @classmethod
    def from_bounds(cls, bounds: DigitBounds, value: int | None = None) -> Digit:
        return cls(bounds.min if value is None else value, bounds.min, bounds.max)

    @classmethod
    def from_config(cls, config: DigitConfig) -> Digit:
        return cls(config.initial_value, config.min, config.max)

    # -- pure operations ----------------------------------------------------

    def _spawn(self, raw: int) -> Digit:
        return Digit(raw, self.min, self.max)

    def plus(self, other: BoundedValue | int) -> Digit:
        return self._spawn(self.value + as_int(other))

    def minus(self, other: BoundedValue | int) -> Digit:
        return self._spawn(self.value - as_int(other))

    def times(self, other: BoundedValue | int) -> Digit:
        return self._spawn(self.value * as_int(other))

    def div(self, other: BoundedValue | int) -> Digit:
        return self._spawn(_quotient(self.value, as_int(other)))

    __add__ = plus
    __sub__ = minus
    __mul__ = times
    __truediv__ = div
    __floordiv__ = div

    # -- mutating operations ------------------------------------------------

    def plus_assign(self, other: BoundedValue | int) -> Digit:
        self.value = self.value + as_int(other)
        return self

    def minus_assign(self, other: BoundedValue | int) -> Digit:
        self.value = self.value - as_int(other)
        return self

    def times_assign(self, other: BoundedValue | int) -> Digit:
        self.value = self.value * as_int(other)
        return self

    def div_assign(self, other: BoundedValue | int) -> Digit:
        self.value = _quotient(self.value, as_int(other))
        return self

    __iadd__ = plus_assign
    __isub__ = minus_assign
    __imul__ = times_assign
    __itruediv__ = div_assign
    __ifloordiv__ = div_assign

    def inc(self) -> Digit:
        """Add one in place and return this digit."""
        self.value = self.value + 1
        return self

    def dec(self) -> Digit:
        """Subtract one in place and return this digit."""
        self.value = self.value - 1
        return self


def _quotient(dividend: int, divisor: int) -> int:
    if divisor == 0:                                              # DIV-ZERO
        raise ZeroDivisionError("division by zero")
    return truncdiv(dividend, divisor)                            # DIV-NORMAL


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------

def to_digit(value: int, min: int = MIN_SAFE, max: int = MAX_SAFE) -> Digit:
    """Convert a plain int into a digit bounded by [min, max]."""
    return Digit(value, min, max)


def range_to_digit(r: range) -> Digit:
    """Convert a Python ``range`` into a digit starting at its first element.

    ``range`` is half-open, so the digit's ``max`` is ``r.stop - 1``.
    Only ranges with step 1 describe a digit; an empty range has
    ``max < min`` and raises ``InvalidBounds``.
    """
    if r.step != 1:
        raise ValueError(f"range step must be 1, got {r.step}")
    return Digit(r.start, r.start, r.stop - 1)


# ---------------------------------------------------------------------------
# Delegate
# ---------------------------------------------------------------------------

class DigitDelegate:
    """Expose a digit as a plain ``int`` attribute.

    Declared in a class body, every instance of the owner gets its own
    private ``Digit``.  Reads return the settled value, writes assign
    (so out-of-range writes wrap).  Bounds, carry and neighbour stay
    hidden::

        class Clock:
            second = delegate(0, 59)

        clock = Clock()
        clock.second = 61      # clock.second == 1
    """

    def __init__(
        self, value: int | None = None, min: int = MIN_SAFE, max: int = MAX_SAFE
    ) -> None:
        self._bounds = DigitBounds(min=min, max=max)
        self._initial = min if value is None else value
        self._attr: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self._attr = f"_{name}_digit"

    def _digit(self, instance: Any) -> Digit:
        if self._attr is None:
            raise TypeError("DigitDelegate must be assigned in a class body")
        try:
            return instance.__dict__[self._attr]
        except KeyError:
            digit = Digit.from_bounds(self._bounds, self._initial)
            instance.__dict__[self._attr] = digit
            return digit

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return self._digit(instance).value

    def __set__(self, instance: Any, value: int) -> None:
        self._digit(instance).value = value


def delegate(min: int = MIN_SAFE, max: int = MAX_SAFE, value: int | None = None) -> DigitDelegate:
    """Build a ``DigitDelegate`` over [min, max] starting at ``value``."""
    return DigitDelegate(value, min, max)
