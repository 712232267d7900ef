"""
Study session database model.

An immutable record of one completed study session.  ``points_earned``
is computed once at intake and never recomputed.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.core.clock import utc_now


class StudySession(SQLModel, table=True):
    """A single logged study session."""

    __tablename__ = "study_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    session_date: datetime.date = Field(nullable=False, index=True)

    subject: str = Field(nullable=False, max_length=100)
    topic: Optional[str] = Field(default=None, max_length=255)
    duration_minutes: int = Field(nullable=False)
    notes: Optional[str] = Field(default=None, max_length=1000)

    points_earned: int = Field(default=0, nullable=False)

    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
