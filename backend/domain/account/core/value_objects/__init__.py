"""Value objects for account domain."""

from .email import Email
from .role import AccountStatus, Role

__all__ = ["AccountStatus", "Email", "Role"]
