"""
Base database configuration.

Import all models here so ``SQLModel.metadata`` knows every table.
"""

from app.models.user import User  # noqa: F401
from app.models.study_session import StudySession  # noqa: F401
from app.models.fitness_session import FitnessSession  # noqa: F401
