"""Authorization outcomes for privileged account operations."""

from dataclasses import dataclass
from enum import Enum


class DenialReason(str, Enum):
    """Why a privileged operation was refused."""

    NOT_ADMIN = "not_admin"
    NOT_SUPER_ADMIN = "not_super_admin"
    TARGET_IS_SUPER_ADMIN = "target_is_super_admin"
    SELF_REVOCATION = "self_revocation"

    def description(self) -> str:
        descriptions = {
            DenialReason.NOT_ADMIN: "Only admins can change account status",
            DenialReason.NOT_SUPER_ADMIN: "Only the super admin can change admin access",
            DenialReason.TARGET_IS_SUPER_ADMIN: "The super admin's access cannot be modified",
            DenialReason.SELF_REVOCATION: "You cannot remove your own admin access",
        }
        return descriptions[self]


@dataclass(frozen=True)
class AuthorizationDenied:
    """Benign failure returned when a privileged change is refused.

    No state is changed when this outcome is produced.

    Attributes:
        actor_id: Account that attempted the change
        target_id: Account the change was aimed at
        reason: Rule that refused the change
    """

    actor_id: str
    target_id: str
    reason: DenialReason

    @property
    def message(self) -> str:
        return self.reason.description()
