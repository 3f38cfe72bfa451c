"""Account entity - aggregate root."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from domain.account.core.value_objects.email import Email
from domain.account.core.value_objects.role import AccountStatus, Role


@dataclass
class Account:
    """Account aggregate root.

    Invariants:
    - account_id and email are unique; created_at is immutable
    - is_super_admin is never cleared once set
    - admin_access is independent of the role label
    - deactivation is logical; accounts are never hard-deleted

    The password is stored as entered. Credential checks go through the
    account repository so the scheme can change without touching the
    lifecycle rules.

    Examples:
        >>> account = Account.create(Email("jane@example.com"), "secret123")
        >>> account.is_active
        True
        >>> account.deactivate()
        >>> account.account_status
        <AccountStatus.DEACTIVATED: 'deactivated'>
    """

    account_id: str
    email: Email
    password: str
    role: Role = Role.USER
    admin_access: bool = False
    is_super_admin: bool = False
    account_status: AccountStatus = AccountStatus.ACTIVE
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @staticmethod
    def create(
        email: Email,
        password: str,
        role: Role = Role.USER,
        created_at: Optional[datetime] = None,
    ) -> "Account":
        """Factory method for a new, active account."""
        now = created_at or datetime.utcnow()
        return Account(
            account_id=str(uuid4()),
            email=email,
            password=password,
            role=role,
            admin_access=role is Role.ADMIN,
            created_at=now,
            updated_at=now,
        )

    @staticmethod
    def create_super_admin(email: Email, password: str) -> "Account":
        """Factory method for the protected super-admin account."""
        account = Account.create(email, password, role=Role.ADMIN)
        account.is_super_admin = True
        account.admin_access = True
        return account

    @property
    def is_active(self) -> bool:
        return self.account_status is AccountStatus.ACTIVE

    @property
    def is_admin(self) -> bool:
        """Whether the account may use the admin console."""
        return self.admin_access or self.is_super_admin

    def deactivate(self) -> None:
        """Mark the account deactivated; deactivated accounts cannot sign in."""
        if not self.is_active:
            return  # Already deactivated

        self.account_status = AccountStatus.DEACTIVATED
        self.updated_at = datetime.utcnow()

    def reactivate(self) -> None:
        if self.is_active:
            return  # Already active

        self.account_status = AccountStatus.ACTIVE
        self.updated_at = datetime.utcnow()

    def toggle_status(self) -> AccountStatus:
        """Flip active <-> deactivated and return the new status."""
        if self.is_active:
            self.deactivate()
        else:
            self.reactivate()
        return self.account_status

    def set_admin_access(self, granted: bool) -> None:
        """Set the admin-access flag.

        Authorization (super-admin only, no self-revocation, super admin
        untouchable) is enforced by the lifecycle controller before this
        is called.
        """
        self.admin_access = granted
        self.updated_at = datetime.utcnow()

    def __eq__(self, other: object) -> bool:
        """Equality based on account_id (aggregate identity)."""
        if not isinstance(other, Account):
            return False
        return self.account_id == other.account_id

    def __hash__(self) -> int:
        return hash(self.account_id)
