"""Configuration and diagnostic models for digits.

``DigitConfig`` describes a digit to build (bounds plus an optional
starting value) and can be loaded from any mapping or JSON document.
``DigitSnapshot`` is the read-only record of a digit's state at one
moment.  This module defines the data models only -- no arithmetic.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bounds import MAX_SAFE, MIN_SAFE, DigitBounds, InvalidBounds


# ---------------------------------------------------------------------------
# DigitConfig: what to build
# ---------------------------------------------------------------------------

class DigitConfig(BaseModel):
    """Bounds and starting value for a new digit.

    ``value`` may lie outside the bounds; it is settled on construction.
    When omitted the digit starts at ``min``.
    """

    min: int = Field(default=MIN_SAFE, description="Inclusive lower bound")
    max: int = Field(default=MAX_SAFE, description="Inclusive upper bound")
    value: int | None = Field(default=None, description="Raw starting value")

    @model_validator(mode="after")
    def max_not_below_min(self) -> DigitConfig:
        if self.max < self.min:
            raise InvalidBounds(self.min, self.max)
        return self

    @property
    def initial_value(self) -> int:
        return self.min if self.value is None else self.value

    def bounds(self) -> DigitBounds:
        return DigitBounds(min=self.min, max=self.max)


# ---------------------------------------------------------------------------
# DigitSnapshot: what a digit looks like right now
# ---------------------------------------------------------------------------

class DigitSnapshot(BaseModel):
    """Frozen diagnostic view of a digit."""

    model_config = ConfigDict(frozen=True)

    value: int
    min: int
    max: int
    range: int = Field(..., ge=1)
    carry: int = Field(
        default=0,
        description="Signed ranges crossed by the most recent assignment",
    )

    @property
    def wrapped(self) -> bool:
        return self.carry != 0
