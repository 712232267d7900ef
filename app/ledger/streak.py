"""
Consecutive-day streak transition.

A streak counts calendar days with at least one session.  Given the
previous ``(streak, last_date)`` and the date of a new session:

- same day as ``last_date``  -> unchanged
- the day after ``last_date`` -> ``streak + 1``
- first session, or a gap    -> reset to 1
- before ``last_date``       -> unchanged (backdated session)
"""

from __future__ import annotations

import datetime
from typing import NamedTuple, Optional


class StreakState(NamedTuple):
    streak: int
    last_date: Optional[datetime.date]


def advance_streak(state: StreakState, session_date: datetime.date) -> StreakState:
    """Fold one session on ``session_date`` into ``state``."""
    last = state.last_date
    if last is None:
        return StreakState(1, session_date)
    if session_date == last:
        return state
    if session_date < last:
        return state
    if session_date - last == datetime.timedelta(days=1):
        return StreakState(state.streak + 1, session_date)
    return StreakState(1, session_date)
