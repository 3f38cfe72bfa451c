"""Entities for food log domain."""

from .daily_log_entry import DailyLogEntry

__all__ = ["DailyLogEntry"]
