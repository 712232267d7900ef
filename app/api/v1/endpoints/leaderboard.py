"""
Leaderboard endpoint.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.leaderboard import LeaderboardEntry
from app.services.leaderboard_service import LeaderboardService

router = APIRouter()


@router.get("", summary="Top users by points, then streak.", response_model=list[LeaderboardEntry], )
def get_leaderboard(limit: Optional[int] = Query(None, description="Number of top users (defaults to 10)"),
                    db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = LeaderboardService(db)
    return service.get_leaderboard(limit, user_id=user.id)
