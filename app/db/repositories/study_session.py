"""
Study session repository.

Rows are append-only: there is no update or delete.
"""

from sqlmodel import Session, select

from app.models.study_session import StudySession


class StudySessionRepository:
    """Repository for StudySession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def add(self, entry: StudySession) -> StudySession:
        """Stage ``entry`` and flush it to get an id.  The caller commits."""
        self.session.add(entry)
        self.session.flush()
        return entry

    def list_by_user(self, user_id: int, limit: int = 10) -> list[StudySession]:
        statement = (select(StudySession).where(StudySession.user_id == user_id)
                     .order_by(StudySession.session_date.desc(), StudySession.created_at.desc(),
                               StudySession.id.desc())
                     .limit(limit))
        return list(self.session.exec(statement).all())
