"""
Fitness session repository.

Rows are append-only: there is no update or delete.
"""

from sqlmodel import Session, select

from app.models.fitness_session import FitnessSession


class FitnessSessionRepository:
    """Repository for FitnessSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def add(self, entry: FitnessSession) -> FitnessSession:
        """Stage ``entry`` and flush it to get an id.  The caller commits."""
        self.session.add(entry)
        self.session.flush()
        return entry

    def list_by_user(self, user_id: int, limit: int = 10) -> list[FitnessSession]:
        statement = (select(FitnessSession).where(FitnessSession.user_id == user_id)
                     .order_by(FitnessSession.session_date.desc(), FitnessSession.created_at.desc(),
                               FitnessSession.id.desc())
                     .limit(limit))
        return list(self.session.exec(statement).all())
