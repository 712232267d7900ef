"""
Point formulas.

Both formulas are linear in the effort signals so an award is a pure
addition to the ledger totals:

- study:   ``floor(duration_minutes * 3)``
- fitness: ``floor(duration_minutes * 2 + calories_burned * 0.1)``,
  missing values count as 0 (a session with neither earns 0 points).

Calories are multiplied as :class:`~decimal.Decimal` so that e.g. 200
calories yield exactly 20 points regardless of float rounding.

A single session is capped at one day (``MAX_SESSION_MINUTES``) and
``MAX_CALORIES_BURNED``; anything larger is rejected as invalid input.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Optional, Union

from app.core.exceptions import InvalidInput

Number = Union[int, float]

STUDY_POINTS_PER_MINUTE = 3
FITNESS_POINTS_PER_MINUTE = 2
FITNESS_POINTS_PER_CALORIE = Decimal("0.1")

MAX_SESSION_MINUTES = 24 * 60
MAX_CALORIES_BURNED = 20_000


def _require_minutes(value: Number) -> int:
    """Return ``value`` as whole minutes within ``[.., MAX_SESSION_MINUTES]``."""
    if isinstance(value, bool):
        raise InvalidInput(f"duration_minutes must be a whole number of minutes, got {value!r}")
    if not isinstance(value, int):
        try:
            whole = float(value).is_integer()
        except (OverflowError, TypeError, ValueError):
            whole = False
        if not whole:
            raise InvalidInput(f"duration_minutes must be a whole number of minutes, got {value!r}")
    minutes = int(value)
    if minutes > MAX_SESSION_MINUTES:
        raise InvalidInput(f"duration_minutes must be at most {MAX_SESSION_MINUTES}, got {minutes}")
    return minutes


def study_points(duration_minutes: Number) -> int:
    """Points for a study session.  ``duration_minutes`` must be > 0."""
    minutes = _require_minutes(duration_minutes)
    if minutes <= 0:
        raise InvalidInput(f"duration_minutes must be positive, got {duration_minutes!r}")
    return math.floor(minutes * STUDY_POINTS_PER_MINUTE)


def fitness_points(duration_minutes: Optional[Number] = None, calories_burned: Optional[Number] = None, ) -> int:
    """Points for a fitness session.  Both inputs are optional and must be >= 0."""
    minutes = 0
    if duration_minutes is not None:
        minutes = _require_minutes(duration_minutes)
        if minutes < 0:
            raise InvalidInput(f"duration_minutes must not be negative, got {duration_minutes!r}")

    calories = Decimal(0)
    if calories_burned is not None:
        if isinstance(calories_burned, bool):
            raise InvalidInput(f"calories_burned must be a number, got {calories_burned!r}")
        try:
            calories = Decimal(str(calories_burned))
        except (ArithmeticError, ValueError):
            raise InvalidInput(f"calories_burned must be a number, got {calories_burned!r}") from None
        if not calories.is_finite():
            raise InvalidInput(f"calories_burned must be a finite number, got {calories_burned!r}")
        if calories < 0:
            raise InvalidInput(f"calories_burned must not be negative, got {calories_burned!r}")
        if calories > MAX_CALORIES_BURNED:
            raise InvalidInput(f"calories_burned must be at most {MAX_CALORIES_BURNED}, got {calories_burned!r}")

    total = Decimal(minutes * FITNESS_POINTS_PER_MINUTE) + calories * FITNESS_POINTS_PER_CALORIE
    return math.floor(total)
