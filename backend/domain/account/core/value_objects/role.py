"""Role and AccountStatus value objects."""

from enum import Enum


class Role(str, Enum):
    """Role label shown for an account.

    The label is informational; admin privileges are governed by the
    account's admin_access flag.
    """

    USER = "USER"
    ADMIN = "ADMIN"


class AccountStatus(str, Enum):
    """Account lifecycle status: active <-> deactivated."""

    ACTIVE = "active"
    DEACTIVATED = "deactivated"

    def toggled(self) -> "AccountStatus":
        if self is AccountStatus.ACTIVE:
            return AccountStatus.DEACTIVATED
        return AccountStatus.ACTIVE
