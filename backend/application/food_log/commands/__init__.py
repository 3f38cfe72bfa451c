"""Food log commands."""

from .delete_log_entry import DeleteLogEntryCommand, DeleteLogEntryCommandHandler

__all__ = ["DeleteLogEntryCommand", "DeleteLogEntryCommandHandler"]
