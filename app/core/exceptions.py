"""
Ledger exceptions.

Every failure of session intake, the points ledger or the leaderboard
is raised as a :class:`LedgerError` subclass.  ``app.main`` registers a
handler that turns them into JSON responses using ``status_code``.
"""

from fastapi import status


class LedgerError(Exception):
    """Base exception for the points ledger."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInput(LedgerError):
    """A request field is malformed or out of range.  Nothing was written."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class NotFound(LedgerError):
    """The referenced user does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


class PersistenceError(LedgerError):
    """The storage layer failed.  The transaction was rolled back."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class ConcurrencyConflict(LedgerError):
    """
    The conditional aggregate update matched no row.

    Raised when another writer bumped the user's ``version`` between the
    read and the write.  The ledger retries internally and only surfaces
    :class:`PersistenceError` once retries are exhausted.
    """

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, user_id: int, expected_version: int):
        self.user_id = user_id
        self.expected_version = expected_version
        super().__init__(f"User {user_id} changed concurrently (expected version {expected_version})")
