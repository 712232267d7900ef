"""User statistics schema."""

import datetime
from typing import Optional

from pydantic import BaseModel


class UserStatsResponse(BaseModel):
    """Aggregate counters of one user plus progress towards the next level."""

    user_id: int
    total_points: int
    study_points: int
    fitness_points: int
    level: int
    points_into_level: int
    points_to_next_level: int
    current_streak: int
    longest_streak: int
    last_activity_date: Optional[datetime.date]
    study_streak: int
    last_study_date: Optional[datetime.date]
    fitness_streak: int
    last_fitness_date: Optional[datetime.date]
