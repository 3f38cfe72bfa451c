"""Ports for food log domain."""

from .repository import IDailyLogRepository

__all__ = ["IDailyLogRepository"]
