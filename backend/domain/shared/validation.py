"""Field-level validation outcomes shared by the domain contexts."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ValidationFailure:
    """Single field-level validation failure.

    Returned to the caller for re-display next to the offending field,
    never raised.

    Attributes:
        field: Name of the input field that failed
        message: Human-readable message for the field
    """

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass
class ValidationResult:
    """Collected validation failures for one form or step.

    Examples:
        >>> result = ValidationResult()
        >>> result.add("first_name", "First name is required")
        >>> result.is_valid
        False
        >>> result.message_for("first_name")
        'First name is required'
    """

    failures: list[ValidationFailure] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.failures

    def add(self, field_name: str, message: str) -> None:
        self.failures.append(ValidationFailure(field=field_name, message=message))

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Append failures of another result (in place) and return self."""
        self.failures.extend(other.failures)
        return self

    def message_for(self, field_name: str) -> Optional[str]:
        """First failure message recorded for a field, if any."""
        return next((f.message for f in self.failures if f.field == field_name), None)

    def as_dict(self) -> dict[str, str]:
        """Map each failing field to its first message."""
        messages: dict[str, str] = {}
        for failure in self.failures:
            messages.setdefault(failure.field, failure.message)
        return messages
