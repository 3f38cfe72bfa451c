"""Account repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.account.core.entities.account import Account
from domain.account.core.value_objects.email import Email


class IAccountRepository(ABC):
    """Repository interface for the Account aggregate.

    Adapters raise PersistenceError when the underlying store fails.
    """

    @abstractmethod
    async def load_account(self, account_id: str) -> Optional[Account]:
        """Find account by id.

        Returns:
            Account if found, None otherwise
        """
        pass

    @abstractmethod
    async def save_account(self, account: Account) -> None:
        """Save account (create or update, keyed by account_id)."""
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[Account]:
        """Find account by (normalized) email.

        Returns:
            Account if found, None otherwise
        """
        pass

    @abstractmethod
    async def verify_credentials(self, account: Account, password: str) -> bool:
        """Check a password against the stored credentials.

        Note:
            The only place where credentials are compared.
        """
        pass

    @abstractmethod
    async def list_accounts(self) -> list[Account]:
        """All accounts, newest first (admin console)."""
        pass
