"""
User statistics endpoints.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.stats import UserStatsResponse
from app.services.ledger_service import LedgerService

router = APIRouter()


@router.get("/me/stats", summary="Points, streaks and level progress of the caller.",
            response_model=UserStatsResponse, )
def get_my_stats(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return LedgerService(db).get_stats(user.id)
