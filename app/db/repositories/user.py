"""
User repository.

Handles database operations for User model, including the conditional
aggregate update used by the ledger and the leaderboard ordering.
"""

from typing import Optional

from sqlalchemy import and_, func, or_, update
from sqlmodel import Session, select

from app.core.clock import utc_now
from app.ledger.award import AggregateState
from app.models.user import User

# Leaderboard order; id keeps ties deterministic
LEADERBOARD_ORDER = (User.total_points.desc(), User.current_streak.desc(), User.id.asc())


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, user: User) -> User:
        """
        Create a new user in the database.

        Args:
            user: User instance to create

        Returns:
            Created user with generated id
        """
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User instance if found, None otherwise
        """
        return self.session.get(User, user_id)

    def get_for_update(self, user_id: int) -> Optional[User]:
        """
        Re-read a user from the database, locking the row where supported.

        ``populate_existing`` discards any stale identity-map copy so the
        returned ``version`` is the one currently stored.
        """
        return self.session.get(User, user_id, with_for_update=True, populate_existing=True)

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            email: User email

        Returns:
            User instance if found, None otherwise
        """
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def get_by_username(self, username: str) -> Optional[User]:
        statement = select(User).where(User.username == username)
        return self.session.exec(statement).first()

    def exists_by_email(self, email: str) -> bool:
        """
        Check if a user with the given email exists.

        Args:
            email: Email to check

        Returns:
            True if user exists, False otherwise
        """
        return self.get_by_email(email) is not None

    def exists_by_username(self, username: str) -> bool:
        return self.get_by_username(username) is not None

    # ------------------------------------------------------------------
    # Ledger write
    # ------------------------------------------------------------------

    def update_aggregates(self, user_id: int, expected_version: int, state: AggregateState) -> bool:
        """
        Write ``state`` in one conditional UPDATE keyed by id and version.

        Does not commit.  Returns ``False`` when no row matched, i.e. the
        row was changed by someone else since ``expected_version`` was read.
        """
        statement = (update(User)
                     .where(User.id == user_id, User.version == expected_version)
                     .values(**state.as_dict(), version=expected_version + 1,
                             updated_at=utc_now())
                     .execution_options(synchronize_session=False))
        result = self.session.exec(statement)
        return result.rowcount == 1

    # ------------------------------------------------------------------
    # Leaderboard queries
    # ------------------------------------------------------------------

    def get_ranked(self, limit: int) -> list[User]:
        """Return the top ``limit`` users in leaderboard order."""
        statement = select(User).order_by(*LEADERBOARD_ORDER).limit(limit)
        return list(self.session.exec(statement).all())

    def rank_of(self, user: User) -> int:
        """1-based leaderboard position of ``user``."""
        ahead = or_(User.total_points > user.total_points,
                    and_(User.total_points == user.total_points, User.current_streak > user.current_streak),
                    and_(User.total_points == user.total_points, User.current_streak == user.current_streak,
                         User.id < user.id), )
        statement = select(func.count()).select_from(User).where(ahead)
        return (self.session.exec(statement).one() or 0) + 1
