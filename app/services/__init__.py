"""Business logic services."""

from app.services.user_service import UserService
from app.services.ledger_service import LedgerService
from app.services.session_log_service import SessionLogService
from app.services.leaderboard_service import LeaderboardService

__all__ = [
    "UserService",
    "LedgerService",
    "SessionLogService",
    "LeaderboardService",
]
