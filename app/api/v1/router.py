"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, fitness, leaderboard, study, users

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    study.router, prefix="/sessions/study", tags=["Study sessions"]
)
api_router.include_router(
    fitness.router, prefix="/sessions/fitness", tags=["Fitness sessions"]
)
api_router.include_router(
    leaderboard.router, prefix="/leaderboard", tags=["Leaderboard"]
)
api_router.include_router(
    users.router, prefix="/users", tags=["Users"]
)
