"""
Session log service.

Validates an incoming activity report, computes its point award with
the category's formula, and hands the new row to the ledger, which
inserts it and applies the award in one transaction.
"""

import datetime
from typing import Optional

from sqlmodel import Session

from app.core.exceptions import InvalidInput
from app.db.repositories.fitness_session import FitnessSessionRepository
from app.db.repositories.study_session import StudySessionRepository
from app.ledger.category import Category
from app.ledger.points import fitness_points, study_points
from app.models.fitness_session import FitnessSession
from app.models.study_session import StudySession
from app.schemas.fitness_session import FitnessSessionCreate
from app.schemas.study_session import StudySessionCreate
from app.services.ledger_service import LedgerService

DEFAULT_HISTORY_LIMIT = 10
MAX_HISTORY_LIMIT = 100


class SessionLogService:
    """Service for study and fitness session intake and history."""

    def __init__(self, session: Session):
        self.ledger = LedgerService(session)
        self.study_repository = StudySessionRepository(session)
        self.fitness_repository = FitnessSessionRepository(session)

    def record_study_session(self, user_id: int, data: StudySessionCreate) -> StudySession:
        """
        Log a study session and award ``floor(duration_minutes * 3)`` points.

        Raises:
            InvalidInput: Blank subject, non-positive duration or a future date
            NotFound: If the user does not exist
            PersistenceError: On storage failure
        """
        subject = (data.subject or "").strip()
        if not subject:
            raise InvalidInput("subject must not be empty")
        points = study_points(data.duration_minutes)
        session_date = self._resolve_date(data.session_date)

        entry = StudySession(user_id=user_id, session_date=session_date, subject=subject, topic=data.topic,
                             duration_minutes=data.duration_minutes, notes=data.notes, points_earned=points, )
        self.ledger.record(user_id, points, Category.STUDY, session_date, entry=entry)
        return entry

    def record_fitness_session(self, user_id: int, data: FitnessSessionCreate) -> FitnessSession:
        """
        Log a fitness session and award
        ``floor(duration_minutes * 2 + calories_burned * 0.1)`` points.

        Raises:
            InvalidInput: Blank activity type, negative metrics or a future date
            NotFound: If the user does not exist
            PersistenceError: On storage failure
        """
        activity_type = (data.activity_type or "").strip()
        if not activity_type:
            raise InvalidInput("activity_type must not be empty")
        points = fitness_points(data.duration_minutes, data.calories_burned)
        session_date = self._resolve_date(data.session_date)

        entry = FitnessSession(user_id=user_id, session_date=session_date, activity_type=activity_type,
                               activity_name=data.activity_name, duration_minutes=data.duration_minutes,
                               calories_burned=data.calories_burned, distance_km=data.distance_km,
                               weight_kg=data.weight_kg, sets=data.sets, reps=data.reps, notes=data.notes,
                               points_earned=points, )
        self.ledger.record(user_id, points, Category.FITNESS, session_date, entry=entry)
        return entry

    def list_study_sessions(self, user_id: int, limit: int = DEFAULT_HISTORY_LIMIT) -> list[StudySession]:
        return self.study_repository.list_by_user(user_id, self._check_limit(limit))

    def list_fitness_sessions(self, user_id: int, limit: int = DEFAULT_HISTORY_LIMIT) -> list[FitnessSession]:
        return self.fitness_repository.list_by_user(user_id, self._check_limit(limit))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_date(session_date: Optional[datetime.date]) -> datetime.date:
        today = datetime.date.today()
        if session_date is None:
            return today
        if session_date > today:
            raise InvalidInput(f"session_date {session_date.isoformat()} is in the future")
        return session_date

    @staticmethod
    def _check_limit(limit: int) -> int:
        if limit <= 0:
            raise InvalidInput(f"limit must be positive, got {limit}")
        return min(limit, MAX_HISTORY_LIMIT)
