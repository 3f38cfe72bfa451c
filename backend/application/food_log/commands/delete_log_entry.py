"""Delete log entry command - remove one food item from an account's log."""

from dataclasses import dataclass
import logging

from domain.food_log.core.ports.repository import IDailyLogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteLogEntryCommand:
    """
    Command: Delete a single log entry.

    Attributes:
        account_id: Account that owns the entry
        entry_id: Entry to delete
    """

    account_id: str
    entry_id: str


class DeleteLogEntryCommandHandler:
    """Handler for DeleteLogEntryCommand."""

    def __init__(self, logs: IDailyLogRepository):
        self._logs = logs

    async def handle(self, command: DeleteLogEntryCommand) -> bool:
        """
        Delete the entry if the account owns it.

        Returns:
            True if an entry was deleted, False if it was missing or
            belongs to another account
        """
        owned = {e.entry_id for e in await self._logs.list_entries(command.account_id)}
        if command.entry_id not in owned:
            logger.warning(
                "Log entry not found for account",
                extra={"account_id": command.account_id, "entry_id": command.entry_id},
            )
            return False

        deleted = await self._logs.delete_entry(command.entry_id)
        logger.info(
            "Log entry deleted",
            extra={"account_id": command.account_id, "entry_id": command.entry_id},
        )
        return deleted
