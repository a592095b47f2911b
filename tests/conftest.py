"""Shared fixtures for digit tests."""
from __future__ import annotations

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from bounds import HOURS, MINUTES, MONTHS, SECONDS
from digit import Digit


@pytest.fixture
def year() -> Digit:
    """An effectively unbounded year counter."""
    return Digit.from_value(value=1981)


@pytest.fixture
def month(year: Digit) -> Digit:
    """December, linked to ``year``."""
    m = Digit.from_bounds(MONTHS, 12)
    m.left_digit = year
    return m


@pytest.fixture
def clock() -> tuple[Digit, Digit, Digit]:
    """23:59:59 as (hours, minutes, seconds), chained right to left."""
    hours = Digit.from_bounds(HOURS, 23)
    minutes = Digit.from_bounds(MINUTES, 59)
    seconds = Digit.from_bounds(SECONDS, 59)
    seconds.left_digit = minutes
    minutes.left_digit = hours
    return hours, minutes, seconds
