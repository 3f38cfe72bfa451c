"""IDailyLogRepository port - food log persistence interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from ..entities.daily_log_entry import DailyLogEntry


class IDailyLogRepository(ABC):
    """Port for daily food log persistence.

    Adapters raise PersistenceError when the underlying store fails.
    """

    @abstractmethod
    async def add_entry(self, entry: DailyLogEntry) -> None:
        """Persist a new entry."""
        pass

    @abstractmethod
    async def list_entries(
        self, account_id: str, day: Optional[date] = None
    ) -> list[DailyLogEntry]:
        """List an account's entries, optionally restricted to one day.

        Returns:
            list[DailyLogEntry]: Entries ordered by day
        """
        pass

    @abstractmethod
    async def delete_all_entries(self, account_id: str) -> int:
        """Delete every entry owned by an account.

        Returns:
            int: Number of entries deleted
        """
        pass

    @abstractmethod
    async def delete_entry(self, entry_id: str) -> bool:
        """Delete a single entry.

        Returns:
            bool: True if the entry existed
        """
        pass
