"""Tests for leaderboard ranking."""

import random

import pytest

from app.core.exceptions import InvalidInput
from app.services.leaderboard_service import LeaderboardService


@pytest.fixture
def users(make_user):
    return {
        "ada": make_user(username="ada", total_points=500, study_points=500, current_streak=2, longest_streak=4),
        "bob": make_user(username="bob", total_points=900, fitness_points=900, current_streak=1,
                         longest_streak=1),
        "cyd": make_user(username="cyd", total_points=500, study_points=200, fitness_points=300, current_streak=5,
                         longest_streak=5),
        "dee": make_user(username="dee", total_points=100, study_points=100, current_streak=0, longest_streak=3),
        "eve": make_user(username="eve", total_points=500, study_points=500, current_streak=2, longest_streak=2),
    }


class TestRanking:
    def test_order(self, db, users):
        entries = LeaderboardService(db).get_leaderboard(limit=10)
        assert [e.username for e in entries] == ["bob", "cyd", "ada", "eve", "dee"]
        assert [e.rank for e in entries] == [1, 2, 3, 4, 5]

    def test_limit(self, db, users):
        entries = LeaderboardService(db).get_leaderboard(limit=2)
        assert [e.username for e in entries] == ["bob", "cyd"]

    def test_default_limit(self, db, make_user):
        for i in range(12):
            make_user(total_points=i, study_points=i)
        assert len(LeaderboardService(db).get_leaderboard()) == 10

    def test_caller_outside_top_appended(self, db, users):
        entries = LeaderboardService(db).get_leaderboard(limit=2, user_id=users["dee"].id)
        assert [e.username for e in entries] == ["bob", "cyd", "dee"]
        assert entries[-1].rank == 5

    def test_caller_inside_top_not_duplicated(self, db, users):
        entries = LeaderboardService(db).get_leaderboard(limit=3, user_id=users["cyd"].id)
        assert [e.username for e in entries] == ["bob", "cyd", "ada"]

    def test_tie_rank_uses_id(self, db, users):
        entries = LeaderboardService(db).get_leaderboard(limit=1, user_id=users["eve"].id)
        assert entries[-1].username == "eve"
        assert entries[-1].rank == 4

    @pytest.mark.parametrize("limit", [0, -3])
    def test_invalid_limit(self, db, users, limit):
        with pytest.raises(InvalidInput):
            LeaderboardService(db).get_leaderboard(limit=limit)

    def test_snapshot_fields(self, db, users):
        top = LeaderboardService(db).get_leaderboard(limit=1)[0]
        assert top.fitness_points == 900
        assert top.level == 1


class TestGeneratedUserSets:
    @pytest.mark.parametrize("seed", [1, 2, 3, 4])
    def test_sorted_and_stable(self, db, make_user, seed):
        rng = random.Random(seed)
        for _ in range(25):
            # Small value ranges force plenty of ties
            study = rng.choice([0, 100, 250])
            fitness = rng.choice([0, 100, 250])
            streak = rng.randint(0, 3)
            make_user(total_points=study + fitness, study_points=study, fitness_points=fitness,
                      current_streak=streak, longest_streak=streak)

        service = LeaderboardService(db)
        first = service.get_leaderboard(limit=25)
        keys = [(-e.total_points, -e.current_streak, e.id) for e in first]
        assert keys == sorted(keys)
        assert [e.id for e in service.get_leaderboard(limit=25)] == [e.id for e in first]

        # Rank of every user computed on its own matches its list position
        for entry in first:
            alone = service.get_leaderboard(limit=1, user_id=entry.id)
            assert alone[-1].rank == entry.rank
