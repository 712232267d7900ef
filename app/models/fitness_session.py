"""
Fitness session database model.

Duration and calories drive the point award; the remaining metrics
(distance, weight, sets, reps) are stored for history only.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.core.clock import utc_now


class FitnessSession(SQLModel, table=True):
    """A single logged fitness session."""

    __tablename__ = "fitness_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    session_date: datetime.date = Field(nullable=False, index=True)

    activity_type: str = Field(nullable=False, max_length=50)
    activity_name: Optional[str] = Field(default=None, max_length=255)
    duration_minutes: Optional[int] = Field(default=None)
    calories_burned: Optional[float] = Field(default=None)

    # History-only metrics
    distance_km: Optional[float] = Field(default=None)
    weight_kg: Optional[float] = Field(default=None)
    sets: Optional[int] = Field(default=None)
    reps: Optional[int] = Field(default=None)
    notes: Optional[str] = Field(default=None, max_length=1000)

    points_earned: int = Field(default=0, nullable=False)

    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
