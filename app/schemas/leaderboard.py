"""Leaderboard API schemas."""

from typing import Optional

from pydantic import BaseModel


class LeaderboardEntry(BaseModel):
    """One ranked user snapshot."""

    rank: int
    id: int
    username: str
    full_name: Optional[str]
    avatar_url: Optional[str]
    total_points: int
    study_points: int
    fitness_points: int
    current_streak: int
    longest_streak: int
    level: int
