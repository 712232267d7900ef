"""
Award folding.

:func:`apply_award` is the single rule that turns one session's points
into new aggregate counters.  It is a pure function of an
:class:`AggregateState` snapshot; persistence and locking live in
:class:`app.services.ledger_service.LedgerService`.
"""

from __future__ import annotations

import datetime
from dataclasses import asdict, dataclass, replace
from typing import Any, Optional

from app.ledger.category import Category
from app.ledger.level import level_for
from app.ledger.streak import StreakState, advance_streak


@dataclass(frozen=True)
class AggregateState:
    """Snapshot of the ledger-owned columns of one ``User`` row."""

    total_points: int = 0
    study_points: int = 0
    fitness_points: int = 0
    level: int = 1
    current_streak: int = 0
    longest_streak: int = 0
    last_activity_date: Optional[datetime.date] = None
    study_streak: int = 0
    last_study_date: Optional[datetime.date] = None
    fitness_streak: int = 0
    last_fitness_date: Optional[datetime.date] = None

    @classmethod
    def from_user(cls, user: Any) -> "AggregateState":
        """Read the aggregate columns off a ``User`` (or any object carrying them)."""
        return cls(**{ name: getattr(user, name) for name in cls.field_names() })

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(cls.__dataclass_fields__)

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def apply_award(state: AggregateState, points: int, category: Category,
                session_date: datetime.date, ) -> AggregateState:
    """
    Fold one award into ``state``.

    1. ``total_points`` and the category subtotal grow by ``points``.
    2. The category streak and the unified streak advance against the
       session date (see :func:`app.ledger.streak.advance_streak`).
    3. ``longest_streak`` keeps the best unified streak.
    4. ``level`` is recomputed from the new total.

    Raises:
        ValueError: If ``points`` is negative
    """
    if points < 0:
        raise ValueError(f"points must not be negative, got {points}")

    fields = category.fields
    category_streak = advance_streak(StreakState(getattr(state, fields.streak), getattr(state, fields.last_date)),
                                     session_date)
    unified = advance_streak(StreakState(state.current_streak, state.last_activity_date), session_date)
    total = state.total_points + points

    changes = {
        "total_points": total,
        fields.points: getattr(state, fields.points) + points,
        fields.streak: category_streak.streak,
        fields.last_date: category_streak.last_date,
        "current_streak": unified.streak,
        "last_activity_date": unified.last_date,
        "longest_streak": max(state.longest_streak, unified.streak),
        "level": level_for(total),
    }
    return replace(state, **changes)
