"""Tests for level derivation."""

import pytest

from app.ledger.level import level_for, points_into_level, points_to_next_level


@pytest.mark.parametrize(
    "total, expected",
    [
        (0, 1),
        (1, 1),
        (999, 1),
        (1000, 2),
        (1999, 2),
        (2000, 3),
        (12345, 13),
    ],
)
def test_level_boundaries(total, expected):
    assert level_for(total) == expected


def test_negative_total_rejected():
    with pytest.raises(ValueError):
        level_for(-1)


def test_level_progress():
    assert points_into_level(290) == 290
    assert points_to_next_level(290) == 710
    assert points_into_level(1000) == 0
    assert points_to_next_level(1000) == 1000
