"""Food log domain exceptions."""


class FoodLogDomainError(Exception):
    """Base exception for food log domain errors."""

    pass


class InvalidLogEntryError(FoodLogDomainError):
    """Raised when a log entry violates its invariants."""

    pass
