"""Pydantic schemas for request/response validation."""

from app.schemas.user import Token, UserCreate, UserLogin, UserResponse
from app.schemas.study_session import StudySessionCreate, StudySessionResponse
from app.schemas.fitness_session import FitnessSessionCreate, FitnessSessionResponse
from app.schemas.leaderboard import LeaderboardEntry
from app.schemas.stats import UserStatsResponse

__all__ = [
    "Token",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "StudySessionCreate",
    "StudySessionResponse",
    "FitnessSessionCreate",
    "FitnessSessionResponse",
    "LeaderboardEntry",
    "UserStatsResponse",
]
