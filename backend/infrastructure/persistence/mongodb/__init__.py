"""MongoDB repository implementations."""

from .account_repository import MongoAccountRepository
from .base import MongoBaseRepository
from .daily_log_repository import MongoDailyLogRepository
from .profile_repository import MongoHealthProfileRepository
from .transaction_manager import MongoTransactionManager

__all__ = [
    "MongoAccountRepository",
    "MongoBaseRepository",
    "MongoDailyLogRepository",
    "MongoHealthProfileRepository",
    "MongoTransactionManager",
]
