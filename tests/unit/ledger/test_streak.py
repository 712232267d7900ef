"""Tests for the consecutive-day streak transition."""

import datetime

from app.ledger.streak import StreakState, advance_streak

D = datetime.date(2026, 3, 10)


def _day(offset: int) -> datetime.date:
    return D + datetime.timedelta(days=offset)


class TestAdvanceStreak:
    def test_first_session_starts_at_one(self):
        assert advance_streak(StreakState(0, None), D) == StreakState(1, D)

    def test_same_day_unchanged(self):
        state = StreakState(4, D)
        assert advance_streak(state, D) == state

    def test_next_day_increments(self):
        assert advance_streak(StreakState(4, D), _day(1)) == StreakState(5, _day(1))

    def test_two_day_gap_resets(self):
        assert advance_streak(StreakState(4, D), _day(2)) == StreakState(1, _day(2))

    def test_three_day_gap_resets(self):
        assert advance_streak(StreakState(1, D), _day(3)) == StreakState(1, _day(3))

    def test_backdated_session_ignored(self):
        state = StreakState(3, D)
        assert advance_streak(state, _day(-1)) == state
        assert advance_streak(state, _day(-10)) == state

    def test_month_boundary(self):
        state = StreakState(2, datetime.date(2026, 2, 28))
        assert advance_streak(state, datetime.date(2026, 3, 1)) == StreakState(3, datetime.date(2026, 3, 1))

    def test_week_of_daily_sessions(self):
        state = StreakState(0, None)
        for offset in range(7):
            state = advance_streak(state, _day(offset))
            state = advance_streak(state, _day(offset))  # second session the same day is free
        assert state == StreakState(7, _day(6))
