"""
Session categories.

Study and fitness are a closed set.  Each category maps to its own
points subtotal column and its own streak columns on ``User``; code
never branches on raw category strings.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class CategoryFields(NamedTuple):
    """Names of the ``User`` columns owned by one category."""

    points: str
    streak: str
    last_date: str


class Category(str, Enum):
    STUDY = "study"
    FITNESS = "fitness"

    @property
    def fields(self) -> CategoryFields:
        return _FIELDS[self]


_FIELDS: dict[Category, CategoryFields] = {
    Category.STUDY: CategoryFields(points="study_points", streak="study_streak", last_date="last_study_date"),
    Category.FITNESS: CategoryFields(points="fitness_points", streak="fitness_streak",
                                     last_date="last_fitness_date"),
}
