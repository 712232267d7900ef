"""
User database model.

Defines the User table: credentials, profile and the aggregate
points / streak / level counters maintained by the ledger.
"""

import datetime
from typing import Optional

from sqlalchemy import BigInteger, DateTime
from sqlmodel import Field, SQLModel

from app.core.clock import utc_now


class User(SQLModel, table=True):
    """
    User model.

    Aggregate counters are only ever written by
    :class:`app.services.ledger_service.LedgerService`.  Invariants:

    - ``total_points == study_points + fitness_points``
    - ``longest_streak >= current_streak``
    - ``level == total_points // 1000 + 1``
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    username: str = Field(unique=True, index=True, max_length=50, nullable=False)
    hashed_password: str = Field(nullable=False)

    # Profile
    full_name: Optional[str] = Field(default=None, max_length=255)
    avatar_url: Optional[str] = Field(default=None, max_length=500)
    is_active: bool = Field(default=True)

    # Points
    total_points: int = Field(default=0, nullable=False, index=True, sa_type=BigInteger)
    study_points: int = Field(default=0, nullable=False, sa_type=BigInteger)
    fitness_points: int = Field(default=0, nullable=False, sa_type=BigInteger)
    level: int = Field(default=1, nullable=False)

    # Unified streak (any category)
    current_streak: int = Field(default=0, nullable=False)
    longest_streak: int = Field(default=0, nullable=False)
    last_activity_date: Optional[datetime.date] = Field(default=None)

    # Per-category streaks
    study_streak: int = Field(default=0, nullable=False)
    last_study_date: Optional[datetime.date] = Field(default=None)
    fitness_streak: int = Field(default=0, nullable=False)
    last_fitness_date: Optional[datetime.date] = Field(default=None)

    # Bumped on every aggregate write, checked by the conditional update
    version: int = Field(default=0, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
