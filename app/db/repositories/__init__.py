"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.study_session import StudySessionRepository
from app.db.repositories.fitness_session import FitnessSessionRepository

__all__ = [
    "UserRepository",
    "StudySessionRepository",
    "FitnessSessionRepository",
]
