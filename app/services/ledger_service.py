"""
Points & streak ledger service.

The only writer of a user's aggregate counters.  One award is applied
as a single unit:

1. take the in-process lock for the user (serializes same-user writers
   within this process; different users never wait on each other),
2. re-read the user row (``SELECT ... FOR UPDATE`` where supported),
3. fold the award with :func:`app.ledger.award.apply_award`,
4. write the result with one conditional ``UPDATE`` keyed by id and
   ``version``, then commit.

A zero-row update means another process won the race; the whole
transaction (including any staged session row) is rolled back and
retried up to ``LEDGER_MAX_RETRIES`` times before giving up with
:class:`PersistenceError`.
"""

import datetime
import logging
import threading
import weakref
from contextlib import contextmanager
from typing import Iterator, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.config import settings
from app.core.exceptions import ConcurrencyConflict, InvalidInput, NotFound, PersistenceError
from app.db.repositories.fitness_session import FitnessSessionRepository
from app.db.repositories.study_session import StudySessionRepository
from app.db.repositories.user import UserRepository
from app.ledger.award import AggregateState, apply_award
from app.ledger.category import Category
from app.ledger.level import points_into_level, points_to_next_level
from app.models.fitness_session import FitnessSession
from app.models.study_session import StudySession
from app.models.user import User
from app.schemas.stats import UserStatsResponse

logger = logging.getLogger(__name__)

SessionEntry = Union[StudySession, FitnessSession]


class _UserLocks:
    """
    Registry of one :class:`threading.Lock` per user id.

    Locks are held weakly: an entry disappears once no thread holds or
    waits on that user's lock.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: "weakref.WeakValueDictionary[int, threading.Lock]" = weakref.WeakValueDictionary()

    @contextmanager
    def hold(self, user_id: int) -> Iterator[None]:
        with self._guard:
            lock = self._locks.get(user_id)
            if lock is None:
                lock = self._locks[user_id] = threading.Lock()
        with lock:
            yield


user_locks = _UserLocks()


class LedgerService:
    """Service that folds session point awards into user aggregates."""

    def __init__(self, session: Session, max_retries: Optional[int] = None):
        self.session = session
        self.users = UserRepository(session)
        self.entries = { Category.STUDY: StudySessionRepository(session),
                         Category.FITNESS: FitnessSessionRepository(session), }
        self.max_retries = max_retries if max_retries is not None else settings.LEDGER_MAX_RETRIES
        if self.max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {self.max_retries}")

    def award_points(self, user_id: int, points: int, category: Category,
                     session_date: Optional[datetime.date] = None, ) -> User:
        """
        Apply an award that has no session row attached.

        Args:
            user_id: Owner of the aggregates
            points: Non-negative point value
            category: Study or fitness
            session_date: Day the activity happened, defaults to today

        Returns:
            The refreshed user

        Raises:
            InvalidInput: If ``points`` is negative
            NotFound: If the user does not exist
            PersistenceError: On storage failure or exhausted retries
        """
        return self.record(user_id, points, category, session_date or datetime.date.today())

    def record(self, user_id: int, points: int, category: Category, session_date: datetime.date,
               entry: Optional[SessionEntry] = None, ) -> User:
        """
        Insert ``entry`` (if given) and apply its award in one transaction.

        The user is looked up before anything is staged, so a missing
        user never leaves an orphan session row behind.
        """
        if points < 0:
            raise InvalidInput(f"points must not be negative, got {points}")

        with user_locks.hold(user_id):
            for attempt in range(1, self.max_retries + 1):
                try:
                    user = self._apply_once(user_id, points, category, session_date, entry)
                except ConcurrencyConflict as exc:
                    self.session.rollback()
                    if entry is not None:
                        entry.id = None
                    logger.warning("Ledger conflict for user %s (attempt %d/%d): %s", user_id, attempt,
                                   self.max_retries, exc)
                    continue
                except NotFound:
                    self.session.rollback()
                    raise
                except SQLAlchemyError as exc:
                    self.session.rollback()
                    logger.exception("Ledger write failed for user %s", user_id)
                    raise PersistenceError(f"Could not apply award for user {user_id}") from exc
                except Exception:
                    self.session.rollback()
                    raise

                logger.info("Awarded %d %s points to user %s on %s (total=%d, streak=%d, level=%d)", points,
                            category.value, user_id, session_date, user.total_points, user.current_streak,
                            user.level)
                return user

        raise PersistenceError(f"Award for user {user_id} kept conflicting after {self.max_retries} attempts")

    def get_stats(self, user_id: int) -> UserStatsResponse:
        """Return the aggregate counters plus level progress."""
        user = self.users.get_by_id(user_id)
        if not user:
            raise NotFound(user_id)
        return UserStatsResponse(
            user_id=user.id, total_points=user.total_points, study_points=user.study_points,
            fitness_points=user.fitness_points, level=user.level,
            points_into_level=points_into_level(user.total_points),
            points_to_next_level=points_to_next_level(user.total_points), current_streak=user.current_streak,
            longest_streak=user.longest_streak, last_activity_date=user.last_activity_date,
            study_streak=user.study_streak, last_study_date=user.last_study_date,
            fitness_streak=user.fitness_streak, last_fitness_date=user.last_fitness_date, )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _apply_once(self, user_id: int, points: int, category: Category, session_date: datetime.date,
                    entry: Optional[SessionEntry], ) -> User:
        user = self.users.get_for_update(user_id)
        if not user:
            raise NotFound(user_id)
        expected_version = user.version

        if entry is not None:
            self.entries[category].add(entry)

        new_state = apply_award(AggregateState.from_user(user), points, category, session_date)
        if not self.users.update_aggregates(user_id, expected_version, new_state):
            raise ConcurrencyConflict(user_id, expected_version)

        self.session.commit()
        self.session.refresh(user)
        if entry is not None:
            self.session.refresh(entry)
        return user
