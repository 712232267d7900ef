"""
Fitness session endpoints.

Logging a session awards its points to the caller immediately.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.fitness_session import FitnessSessionCreate, FitnessSessionResponse
from app.services.session_log_service import DEFAULT_HISTORY_LIMIT, SessionLogService

router = APIRouter()


@router.post("", summary="Log a fitness session.", response_model=FitnessSessionResponse,
             status_code=status.HTTP_201_CREATED, )
def record_fitness_session(data: FitnessSessionCreate, db: Session = Depends(get_db),
                           user: User = Depends(get_current_user), ):
    service = SessionLogService(db)
    return service.record_fitness_session(user.id, data)


@router.get("", summary="List recent fitness sessions, newest first.",
            response_model=list[FitnessSessionResponse], )
def list_fitness_sessions(limit: int = Query(DEFAULT_HISTORY_LIMIT, description="Maximum number of sessions"),
                          db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SessionLogService(db)
    return service.list_fitness_sessions(user.id, limit)
