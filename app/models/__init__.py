"""SQLModel database models."""

from app.models.user import User
from app.models.study_session import StudySession
from app.models.fitness_session import FitnessSession

__all__ = [
    "User",
    "StudySession",
    "FitnessSession",
]
