"""
Leaderboard service.

Ranks users by ``(total_points desc, current_streak desc)``; remaining
ties are broken by ascending user id so repeated queries over unchanged
data return the same order.  Read-only.
"""

from typing import Optional

from sqlmodel import Session

from app.core.config import settings
from app.core.exceptions import InvalidInput
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.leaderboard import LeaderboardEntry


class LeaderboardService:
    """Service for the points leaderboard."""

    def __init__(self, session: Session):
        self.repository = UserRepository(session)

    def get_leaderboard(self, limit: Optional[int] = None, user_id: Optional[int] = None, ) -> list[LeaderboardEntry]:
        """
        Return the top ``limit`` users.

        When ``user_id`` is given and that user is not in the top
        ``limit``, their entry (with its real rank) is appended last.

        Raises:
            InvalidInput: If ``limit`` is not positive
        """
        if limit is None:
            limit = settings.LEADERBOARD_DEFAULT_LIMIT
        if limit <= 0:
            raise InvalidInput(f"limit must be positive, got {limit}")
        limit = min(limit, settings.LEADERBOARD_MAX_LIMIT)

        top = self.repository.get_ranked(limit)
        entries = [self._to_entry(rank, user) for rank, user in enumerate(top, start=1)]

        if user_id is not None and all(user.id != user_id for user in top):
            me = self.repository.get_by_id(user_id)
            if me:
                entries.append(self._to_entry(self.repository.rank_of(me), me))
        return entries

    @staticmethod
    def _to_entry(rank: int, user: User) -> LeaderboardEntry:
        return LeaderboardEntry(rank=rank, id=user.id, username=user.username, full_name=user.full_name,
                                avatar_url=user.avatar_url, total_points=user.total_points,
                                study_points=user.study_points, fitness_points=user.fitness_points,
                                current_streak=user.current_streak, longest_streak=user.longest_streak,
                                level=user.level, )
