"""Domain exceptions for food log."""

from .log_errors import FoodLogDomainError, InvalidLogEntryError

__all__ = ["FoodLogDomainError", "InvalidLogEntryError"]
