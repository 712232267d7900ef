"""
Study session endpoints.

Logging a session awards its points to the caller immediately.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.study_session import StudySessionCreate, StudySessionResponse
from app.services.session_log_service import DEFAULT_HISTORY_LIMIT, SessionLogService

router = APIRouter()


@router.post("", summary="Log a study session.", response_model=StudySessionResponse,
             status_code=status.HTTP_201_CREATED, )
def record_study_session(data: StudySessionCreate, db: Session = Depends(get_db),
                         user: User = Depends(get_current_user), ):
    service = SessionLogService(db)
    return service.record_study_session(user.id, data)


@router.get("", summary="List recent study sessions, newest first.", response_model=list[StudySessionResponse], )
def list_study_sessions(limit: int = Query(DEFAULT_HISTORY_LIMIT, description="Maximum number of sessions"),
                        db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = SessionLogService(db)
    return service.list_study_sessions(user.id, limit)
