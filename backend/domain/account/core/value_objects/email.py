"""Email value object."""

import re
from dataclasses import dataclass

from domain.account.core.exceptions.account_errors import InvalidEmailError

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


@dataclass(frozen=True)
class Email:
    """Account email address, unique per account.

    Surrounding whitespace is stripped and the address is lower-cased so
    lookups are case-insensitive.

    Examples:
        >>> str(Email(" Admin@Example.com "))
        'admin@example.com'
    """

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip().lower()
        if not normalized:
            raise InvalidEmailError(self.value, "Email cannot be empty")
        if not EMAIL_PATTERN.match(normalized):
            raise InvalidEmailError(self.value, "invalid format")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def is_valid(raw: str) -> bool:
        return bool(EMAIL_PATTERN.match((raw or "").strip().lower()))
