"""In-memory persistence implementations."""

from .account_repository import InMemoryAccountRepository
from .daily_log_repository import InMemoryDailyLogRepository
from .profile_repository import InMemoryHealthProfileRepository
from .transaction_manager import InMemoryTransactionManager

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryDailyLogRepository",
    "InMemoryHealthProfileRepository",
    "InMemoryTransactionManager",
]
