"""
Fitness session API schemas.

Duration and calories are both optional; a session with neither is
accepted and earns 0 points.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.ledger.points import MAX_CALORIES_BURNED, MAX_SESSION_MINUTES


class FitnessSessionCreate(BaseModel):
    """Schema for logging a fitness session."""

    activity_type: str = Field(..., min_length=1, max_length=50, alias="activityType",
                               description="Activity category, e.g. 'running' or 'gym'")
    duration_minutes: Optional[int] = Field(None, ge=0, le=MAX_SESSION_MINUTES, alias="durationMinutes")
    calories_burned: Optional[float] = Field(None, ge=0, le=MAX_CALORIES_BURNED, allow_inf_nan=False,
                                             alias="caloriesBurned")
    activity_name: Optional[str] = Field(None, max_length=255, alias="activityName")
    distance_km: Optional[float] = Field(None, ge=0, le=10_000, allow_inf_nan=False, alias="distanceKm")
    weight_kg: Optional[float] = Field(None, ge=0, le=1_000, allow_inf_nan=False, alias="weightKg")
    sets: Optional[int] = Field(None, ge=0, le=1_000)
    reps: Optional[int] = Field(None, ge=0, le=10_000)
    notes: Optional[str] = Field(None, max_length=1000)
    session_date: Optional[datetime.date] = Field(None, alias="sessionDate")

    @field_validator("activity_type")
    @classmethod
    def activity_type_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("activity_type must not be blank")
        return value

    class Config:
        populate_by_name = True


class FitnessSessionResponse(BaseModel):
    """Schema for a fitness session in API responses."""

    id: int
    user_id: int
    session_date: datetime.date
    activity_type: str
    activity_name: Optional[str]
    duration_minutes: Optional[int]
    calories_burned: Optional[float]
    distance_km: Optional[float]
    weight_kg: Optional[float]
    sets: Optional[int]
    reps: Optional[int]
    notes: Optional[str]
    points_earned: int
    created_at: datetime.datetime

    class Config:
        from_attributes = True
