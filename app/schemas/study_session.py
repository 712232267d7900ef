"""
Study session API schemas.

Request bodies accept both camelCase (``durationMinutes``) and
snake_case (``duration_minutes``) field names.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.ledger.points import MAX_SESSION_MINUTES


class StudySessionCreate(BaseModel):
    """Schema for logging a study session."""

    subject: str = Field(..., min_length=1, max_length=100, description="Subject studied, e.g. 'Mathematics'")
    duration_minutes: int = Field(..., gt=0, le=MAX_SESSION_MINUTES, alias="durationMinutes",
                                  description="Minutes studied (1 to 1440)")
    topic: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = Field(None, max_length=1000)
    session_date: Optional[datetime.date] = Field(
        None, alias="sessionDate", description="Day of the session (defaults to today)"
    )

    @field_validator("subject")
    @classmethod
    def subject_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("subject must not be blank")
        return value

    class Config:
        populate_by_name = True


class StudySessionResponse(BaseModel):
    """Schema for a study session in API responses."""

    id: int
    user_id: int
    session_date: datetime.date
    subject: str
    topic: Optional[str]
    duration_minutes: int
    notes: Optional[str]
    points_earned: int
    created_at: datetime.datetime

    class Config:
        from_attributes = True
