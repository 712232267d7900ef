"""Ledger core rules: point formulas, streaks, levels and award folding."""

from app.ledger.award import AggregateState, apply_award
from app.ledger.category import Category
from app.ledger.level import level_for
from app.ledger.points import fitness_points, study_points

__all__ = ["AggregateState", "Category", "apply_award", "fitness_points", "level_for", "study_points"]
