"""Tests for the study and fitness point formulas."""

import math

import pytest

from app.core.exceptions import InvalidInput
from app.ledger.points import MAX_CALORIES_BURNED, MAX_SESSION_MINUTES, fitness_points, study_points


# ======================================================================
# Study
# ======================================================================


class TestStudyPoints:
    @pytest.mark.parametrize("minutes, expected", [(1, 3), (25, 75), (60, 180), (90, 270)])
    def test_three_points_per_minute(self, minutes, expected):
        assert study_points(minutes) == expected

    @pytest.mark.parametrize("minutes", range(1, 300, 7))
    def test_matches_floor_formula(self, minutes):
        assert study_points(minutes) == math.floor(minutes * 3)

    @pytest.mark.parametrize("minutes", [0, -1, -60])
    def test_non_positive_duration_rejected(self, minutes):
        with pytest.raises(InvalidInput, match="positive"):
            study_points(minutes)

    def test_fractional_minutes_rejected(self):
        with pytest.raises(InvalidInput, match="whole number"):
            study_points(12.5)

    def test_whole_float_accepted(self):
        assert study_points(10.0) == 30


# ======================================================================
# Fitness
# ======================================================================


class TestFitnessPoints:
    def test_duration_and_calories(self):
        # floor(45 * 2 + 200 * 0.1)
        assert fitness_points(45, 200) == 110

    def test_duration_only(self):
        assert fitness_points(30) == 60

    def test_calories_only(self):
        assert fitness_points(calories_burned=350) == 35

    def test_neither_earns_zero(self):
        assert fitness_points() == 0
        assert fitness_points(None, None) == 0

    def test_calories_are_floored(self):
        # 10 * 2 + 15 * 0.1 = 21.5
        assert fitness_points(10, 15) == 21

    def test_fractional_calories_exact(self):
        # 0.1 * 29.9 = 2.99 -> 2, float arithmetic must not round up
        assert fitness_points(0, 29.9) == 2
        assert fitness_points(0, 30.0) == 3

    @pytest.mark.parametrize("minutes, calories", [(m, c) for m in (0, 1, 17, 60) for c in (0, 5, 99, 200, 1234)])
    def test_matches_floor_formula(self, minutes, calories):
        assert fitness_points(minutes, calories) == (minutes * 2 * 10 + calories) // 10

    def test_zero_duration_allowed(self):
        assert fitness_points(0, 0) == 0

    def test_negative_duration_rejected(self):
        with pytest.raises(InvalidInput):
            fitness_points(-5, 100)

    def test_negative_calories_rejected(self):
        with pytest.raises(InvalidInput):
            fitness_points(10, -1)

    def test_non_finite_calories_rejected(self):
        with pytest.raises(InvalidInput):
            fitness_points(10, float("inf"))


# ======================================================================
# Bounds
# ======================================================================


class TestBounds:
    def test_full_day_of_study_accepted(self):
        assert study_points(MAX_SESSION_MINUTES) == MAX_SESSION_MINUTES * 3

    def test_longer_than_a_day_rejected(self):
        with pytest.raises(InvalidInput, match="at most"):
            study_points(MAX_SESSION_MINUTES + 1)
        with pytest.raises(InvalidInput, match="at most"):
            fitness_points(MAX_SESSION_MINUTES + 1)

    @pytest.mark.parametrize("minutes", [10**19, 10**400])
    def test_huge_integer_duration_rejected(self, minutes):
        with pytest.raises(InvalidInput):
            study_points(minutes)

    def test_huge_float_duration_rejected(self):
        with pytest.raises(InvalidInput):
            study_points(1e300)

    def test_calorie_cap(self):
        assert fitness_points(0, MAX_CALORIES_BURNED) == MAX_CALORIES_BURNED // 10
        with pytest.raises(InvalidInput, match="at most"):
            fitness_points(0, MAX_CALORIES_BURNED + 1)

    @pytest.mark.parametrize("calories", [1e300, 10**400, float("nan")])
    def test_huge_calories_rejected(self, calories):
        with pytest.raises(InvalidInput):
            fitness_points(10, calories)
