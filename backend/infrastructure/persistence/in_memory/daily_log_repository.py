"""In-memory implementation of IDailyLogRepository."""

from copy import deepcopy
from datetime import date
from typing import Optional

from domain.food_log.core.entities.daily_log_entry import DailyLogEntry
from domain.food_log.core.ports.repository import IDailyLogRepository


class InMemoryDailyLogRepository(IDailyLogRepository):
    """
    In-memory implementation of the food log repository.

    Entries are immutable, so they are stored as-is keyed by entry id.
    """

    def __init__(self) -> None:
        self._entries: dict[str, DailyLogEntry] = {}

    async def add_entry(self, entry: DailyLogEntry) -> None:
        self._entries[entry.entry_id] = entry

    async def list_entries(
        self, account_id: str, day: Optional[date] = None
    ) -> list[DailyLogEntry]:
        entries = [
            e
            for e in self._entries.values()
            if e.account_id == account_id and (day is None or e.day == day)
        ]
        return sorted(entries, key=lambda e: e.day)

    async def delete_all_entries(self, account_id: str) -> int:
        doomed = [k for k, e in self._entries.items() if e.account_id == account_id]
        for entry_id in doomed:
            del self._entries[entry_id]
        return len(doomed)

    async def delete_entry(self, entry_id: str) -> bool:
        return self._entries.pop(entry_id, None) is not None

    def snapshot(self) -> dict[str, DailyLogEntry]:
        """Copy of the current state, for transaction rollback."""
        return deepcopy(self._entries)

    def restore(self, state: dict[str, DailyLogEntry]) -> None:
        self._entries = state

    def clear(self) -> None:
        self._entries.clear()

    def count(self) -> int:
        return len(self._entries)
